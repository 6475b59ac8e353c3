"""Exceptions for the JSON-RPC CLI argument converter."""
from typing import Optional, Union

class RPCConvertError(Exception):
    """Base class for all conversion errors."""
    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text

class JSONParseError(RPCConvertError):
    """Raw text for a converted parameter is not a valid JSON value."""
    def __init__(
        self,
        raw_text: str,
        method: Optional[str] = None,
        param: Union[int, str, None] = None,
    ):
        super().__init__(f"Error parsing JSON: {raw_text}", raw_text)
        self.method = method
        self.param = param

    def with_context(self, method: str, param: Union[int, str]) -> "JSONParseError":
        """Return a copy of this error tagged with the method and parameter."""
        return JSONParseError(self.raw_text, method, param)

class MissingEqualsError(RPCConvertError):
    """Named argument token without a '=' delimiter."""
    def __init__(self, token: str):
        super().__init__(
            f"No '=' in named argument '{token}', this needs to be present "
            "for every argument (even if it is empty)",
            token,
        )

class RuleDefinitionError(RPCConvertError):
    """Conversion rule with an invalid method, index or name."""
    pass
