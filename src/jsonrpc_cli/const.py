"""Constants for the JSON-RPC CLI argument converter."""

# (method, param index, param name) for every non-string RPC argument that
# must be parsed as JSON before it is sent. Parameter indexes start from 0.
CONVERSION_RULES = (
    ("setmocktime", 0, "timestamp"),
    ("generate", 0, "nblocks"),
    ("generate", 1, "maxtries"),
    ("generatetoaddress", 0, "nblocks"),
    ("generatetoaddress", 2, "maxtries"),
    ("getnetworkhashps", 0, "nblocks"),
    ("getnetworkhashps", 1, "height"),
    ("sendtoaddress", 1, "amount"),
    ("sendtoaddress", 4, "subtractfeefromamount"),
    ("sendtoaddress", 5, "replaceable"),
    ("sendtoaddress", 6, "conf_target"),
    ("settxfee", 0, "amount"),
    ("getreceivedbyaddress", 1, "minconf"),
    ("getreceivedbyaccount", 1, "minconf"),
    ("listreceivedbyaddress", 0, "minconf"),
    ("listreceivedbyaddress", 1, "include_empty"),
    ("listreceivedbyaddress", 2, "include_watchonly"),
    ("listreceivedbyaccount", 0, "minconf"),
    ("listreceivedbyaccount", 1, "include_empty"),
    ("listreceivedbyaccount", 2, "include_watchonly"),
    ("getbalance", 1, "minconf"),
    ("getbalance", 2, "include_watchonly"),
    ("getblockhash", 0, "height"),
    ("waitforblockheight", 0, "height"),
    ("waitforblockheight", 1, "timeout"),
    ("waitforblock", 1, "timeout"),
    ("waitfornewblock", 0, "timeout"),
    ("move", 2, "amount"),
    ("move", 3, "minconf"),
    ("sendfrom", 2, "amount"),
    ("sendfrom", 3, "minconf"),
    ("listtransactions", 1, "count"),
    ("listtransactions", 2, "skip"),
    ("listtransactions", 3, "include_watchonly"),
    ("listaccounts", 0, "minconf"),
    ("listaccounts", 1, "include_watchonly"),
    ("walletpassphrase", 1, "timeout"),
    ("walletpassphrase", 2, "stakingonly"),
    ("getblocktemplate", 0, "template_request"),
    ("listsinceblock", 1, "target_confirmations"),
    ("listsinceblock", 2, "include_watchonly"),
    ("listsinceblock", 3, "include_removed"),
    ("sendmany", 1, "amounts"),
    ("sendmany", 2, "minconf"),
    ("sendmany", 4, "subtractfeefrom"),
    ("sendmany", 5, "replaceable"),
    ("sendmany", 6, "conf_target"),
    ("addmultisigaddress", 0, "nrequired"),
    ("addmultisigaddress", 1, "keys"),
    ("createmultisig", 0, "nrequired"),
    ("createmultisig", 1, "keys"),
    ("listunspent", 0, "minconf"),
    ("listunspent", 1, "maxconf"),
    ("listunspent", 2, "addresses"),
    ("listunspent", 3, "include_unsafe"),
    ("listunspent", 4, "query_options"),
    ("getblock", 1, "verbosity"),
    ("getblockheader", 1, "verbose"),
    ("getchaintxstats", 0, "nblocks"),
    ("gettransaction", 1, "include_watchonly"),
    ("getrawtransaction", 1, "verbose"),
    ("createrawtransaction", 0, "inputs"),
    ("createrawtransaction", 1, "outputs"),
    ("createrawtransaction", 2, "locktime"),
    ("createrawtransaction", 3, "replaceable"),
    ("signrawtransaction", 1, "prevtxs"),
    ("signrawtransaction", 2, "privkeys"),
    ("sendrawtransaction", 1, "allowhighfees"),
    ("combinerawtransaction", 0, "txs"),
    ("fundrawtransaction", 1, "options"),
    ("gettxout", 1, "n"),
    ("gettxout", 2, "include_mempool"),
    ("gettxoutproof", 0, "txids"),
    ("lockunspent", 0, "unlock"),
    ("lockunspent", 1, "transactions"),
    ("importprivkey", 2, "rescan"),
    ("importaddress", 2, "rescan"),
    ("importaddress", 3, "p2sh"),
    ("importpubkey", 2, "rescan"),
    ("importmulti", 0, "requests"),
    ("importmulti", 1, "options"),
    ("verifychain", 0, "checklevel"),
    ("verifychain", 1, "nblocks"),
    ("pruneblockchain", 0, "height"),
    ("keypoolrefill", 0, "newsize"),
    ("getrawmempool", 0, "verbose"),
    ("estimatefee", 0, "nblocks"),
    ("estimatesmartfee", 0, "nblocks"),
    ("estimaterawfee", 0, "nblocks"),
    ("estimaterawfee", 1, "threshold"),
    ("prioritisetransaction", 1, "dummy"),
    ("prioritisetransaction", 2, "fee_delta"),
    ("setban", 2, "bantime"),
    ("setban", 3, "absolute"),
    ("setnetworkactive", 0, "state"),
    ("getmempoolancestors", 1, "verbose"),
    ("getmempooldescendants", 1, "verbose"),
    ("getblockhashes", 0, "high"),
    ("getblockhashes", 1, "low"),
    ("getblockhashes", 2, "options"),
    ("getspentinfo", 0, "txid_index"),
    ("getaddresstxids", 0, "addresses"),
    ("getaddressbalance", 0, "addresses"),
    ("getaddressdeltas", 0, "addresses"),
    ("getaddressutxos", 0, "addresses"),
    ("getaddressmempool", 0, "addresses"),
    ("bumpfee", 1, "options"),

    # Particl extensions
    ("reservebalance", 0, "enabled"),
    ("scanchain", 0, "height"),
    ("deriverangekeys", 0, "start"),
    ("deriverangekeys", 1, "end"),
    ("filtertransactions", 0, "count"),
    ("filtertransactions", 1, "skip"),
    ("filtertransactions", 2, "include_watchonly"),
    ("filteraddresses", 0, "offset"),
    ("filteraddresses", 1, "count"),
    ("setvote", 0, "proposal"),
    ("setvote", 1, "option"),
    ("setvote", 2, "height_start"),
    ("setvote", 3, "height_end"),
    ("tallyvotes", 0, "proposal"),
    ("tallyvotes", 1, "height_start"),
    ("tallyvotes", 2, "height_end"),

    # Transfers between part, blind and anon balances
    ("sendparttoblind", 1, "amount"),
    ("sendparttoblind", 4, "subtractfeefromamount"),
    ("sendparttoanon", 1, "amount"),
    ("sendparttoanon", 4, "subtractfeefromamount"),

    ("sendblindtopart", 1, "amount"),
    ("sendblindtopart", 4, "subtractfeefromamount"),
    ("sendblindtoblind", 1, "amount"),
    ("sendblindtoblind", 4, "subtractfeefromamount"),
    ("sendblindtoanon", 1, "amount"),
    ("sendblindtoanon", 4, "subtractfeefromamount"),

    ("sendanontopart", 1, "amount"),
    ("sendanontopart", 4, "subtractfeefromamount"),
    ("sendanontopart", 6, "ringsize"),
    ("sendanontopart", 7, "inputs_per_sig"),

    ("sendanontoblind", 1, "amount"),
    ("sendanontoblind", 4, "subtractfeefromamount"),
    ("sendanontoblind", 6, "ringsize"),
    ("sendanontoblind", 7, "inputs_per_sig"),

    ("sendanontoanon", 1, "amount"),
    ("sendanontoanon", 4, "subtractfeefromamount"),
    ("sendanontoanon", 6, "ringsize"),
    ("sendanontoanon", 7, "inputs_per_sig"),

    ("sendtypeto", 2, "outputs"),
    ("sendtypeto", 5, "ringsize"),
    ("sendtypeto", 6, "inputs_per_sig"),
    ("sendtypeto", 7, "test_fee"),
    ("sendtypeto", 8, "coincontrol"),

    ("buildscript", 0, "json"),

    ("walletsettings", 1, "json"),

    ("getnewextaddress", 1, "childno"),

    ("listunspentanon", 0, "minconf"),
    ("listunspentanon", 1, "maxconf"),
    ("listunspentanon", 2, "addresses"),
    ("listunspentanon", 3, "include_unsafe"),
    ("listunspentanon", 4, "query_options"),

    ("listunspentblind", 0, "minconf"),
    ("listunspentblind", 1, "maxconf"),
    ("listunspentblind", 2, "addresses"),
    ("listunspentblind", 3, "include_unsafe"),
    ("listunspentblind", 4, "query_options"),

    ("smsgsend", 3, "paid_msg"),

    ("logging", 0, "include"),
    ("logging", 1, "exclude"),
    ("disconnectnode", 1, "nodeid"),

    # Echo with conversion, test only
    ("echojson", 0, "arg0"),
    ("echojson", 1, "arg1"),
    ("echojson", 2, "arg2"),
    ("echojson", 3, "arg3"),
    ("echojson", 4, "arg4"),
    ("echojson", 5, "arg5"),
    ("echojson", 6, "arg6"),
    ("echojson", 7, "arg7"),
    ("echojson", 8, "arg8"),
    ("echojson", 9, "arg9"),
)

# Config
CONFIG_FILE = "jsonrpc_cli.json"
ENV_CONFIG_FILE = "JSONRPC_CLI_CONFIG"
ENV_NAMED = "JSONRPC_CLI_NAMED"
