"""Registry of RPC parameters that are sent as parsed JSON.

The RPC server cannot infer types from untyped command-line text, so the
client keeps a table of (method, index, name) entries for every parameter
that is a number, boolean, array or object. Anything not listed is sent as
the literal string the user typed.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Sequence, Union

from .const import CONVERSION_RULES
from .exceptions import RuleDefinitionError

_LOGGER = logging.getLogger(__name__)

@dataclass(frozen=True)
class ConversionRule:
    """A single parameter of a method that needs JSON parsing."""

    method: str
    index: int
    name: str

    def __post_init__(self):
        if not isinstance(self.method, str) or not self.method:
            raise RuleDefinitionError(f"Invalid method name in conversion rule: {self.method!r}")
        # bool is an int subclass; True is not a parameter position.
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            raise RuleDefinitionError(
                f"Invalid parameter index for '{self.method}': {self.index!r}"
            )
        if not isinstance(self.name, str) or not self.name:
            raise RuleDefinitionError(
                f"Invalid parameter name for '{self.method}' index {self.index}: {self.name!r}"
            )

    @classmethod
    def from_entry(cls, entry: Sequence[Any]) -> "ConversionRule":
        """Create a rule from a (method, index, name) triple."""
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise RuleDefinitionError(
                f"Conversion rule must be a [method, index, name] triple, got {entry!r}"
            )
        method, index, name = entry
        return cls(method, index, name)

@dataclass(frozen=True)
class MethodRules:
    """Converted positions and names of one method."""

    indices: FrozenSet[int]
    names: FrozenSet[str]

class ConversionRegistry:
    """Immutable lookup of which method parameters are parsed as JSON.

    Both the positional and the named view live in one record per method,
    so a rule can never be present in one view and missing from the other.
    """

    def __init__(self, rules: Iterable[Union[ConversionRule, Sequence[Any]]]):
        """Build the registry.

        Args:
            rules: ConversionRule objects or (method, index, name) triples.
                Duplicates are ignored and order does not matter.

        Raises:
            RuleDefinitionError: If an entry is not a valid rule.
        """
        unique = set()
        for rule in rules:
            if not isinstance(rule, ConversionRule):
                rule = ConversionRule.from_entry(rule)
            unique.add(rule)

        indices: Dict[str, set] = {}
        names: Dict[str, set] = {}
        for rule in unique:
            indices.setdefault(rule.method, set()).add(rule.index)
            names.setdefault(rule.method, set()).add(rule.name)

        self._methods = MappingProxyType({
            method: MethodRules(frozenset(indices[method]), frozenset(names[method]))
            for method in indices
        })
        self._rules = tuple(sorted(unique, key=lambda r: (r.method, r.index, r.name)))

        _LOGGER.debug(
            "Conversion registry built: %s rules for %s methods",
            len(self._rules), len(self._methods)
        )

    def should_convert(self, method: str, param: Union[int, str]) -> bool:
        """Return True if the parameter (by position or by name) is parsed as JSON."""
        if isinstance(param, str):
            return self.should_convert_name(method, param)
        return self.should_convert_index(method, param)

    def should_convert_index(self, method: str, index: int) -> bool:
        entry = self._methods.get(method)
        if entry is None or isinstance(index, bool):
            return False
        return index in entry.indices

    def should_convert_name(self, method: str, name: str) -> bool:
        entry = self._methods.get(method)
        return entry is not None and name in entry.names

    def rules_for(self, method: str) -> List[ConversionRule]:
        """Return the rules of a method, ordered by parameter index."""
        return [rule for rule in self._rules if rule.method == method]

    def methods(self) -> List[str]:
        """Return the sorted names of all methods with at least one rule."""
        return sorted(self._methods)

    def __contains__(self, method: object) -> bool:
        return method in self._methods

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"<ConversionRegistry rules={len(self._rules)} methods={len(self._methods)}>"

def build_registry(extra_rules: Iterable[Sequence[Any]] = ()) -> ConversionRegistry:
    """Build a registry from the built-in table plus optional extra rules."""
    rules: List[Sequence[Any]] = list(CONVERSION_RULES)
    rules.extend(extra_rules)
    return ConversionRegistry(rules)

DEFAULT_REGISTRY = build_registry()
