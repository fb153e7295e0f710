# --- FILTER SET ------------------------------------------------------------
# A predicate function is picked up by its name and its first parameter:
#   name            accept_title / acceptTitle -> accept (silence), skip_analytics -> skip (drop),
#                   skip_and_log -> accept
#   1st parameter   diff, block/entry, line, fragment_pair/fragments, fragment
# All functions matching an action and a target are OR-ed together.

import inspect
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import ModuleType
from typing import Any, Callable, Iterable

from diff_filters.capabilities import Lenient

logger = logging.getLogger(__name__)

_NAME_TOKEN = re.compile(r'[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+')  # camelCase / snake_case / ACRONYM parts


class Target(Enum):
    UNDEFINED = ()
    DIFF = ('diff',)
    BLOCK = ('block', 'entry')
    LINE = ('line',)
    FRAGMENT_PAIR = ('fragmentpair', 'fragments')
    FRAGMENT = ('fragment',)

    @classmethod
    def from_parameter(cls, name: str) -> 'Target':
        '''maps a parameter name to the kind of value it receives'''
        token = name.replace('_', '').lower()
        for target in cls:
            if token in target.value: return target
        return cls.UNDEFINED


def _get_tokens(name: str) -> frozenset[str]:
    return frozenset(t.lower() for t in _NAME_TOKEN.findall(name))


@dataclass(frozen=True)
class FilterFunction:
    name: str
    target: Target
    func: Callable[[Any], Any]
    tokens: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'tokens', _get_tokens(self.name))

    @property
    def is_accept(self) -> bool:
        return 'accept' in self.tokens or {'skip', 'log'} <= self.tokens

    @property
    def is_skip(self) -> bool:
        return 'skip' in self.tokens and not self.is_accept

    @classmethod
    def from_callable(cls, func: Callable[[Any], Any], name: str | None = None) -> 'FilterFunction | None':
        '''wraps a function taking at least one parameter, None otherwise'''
        try:
            params = list(inspect.signature(func).parameters)
        except (TypeError, ValueError):  # builtins without a signature
            return None
        if not params: return None
        return cls(name or func.__name__, Target.from_parameter(params[0]), func)

    def __call__(self, value: Any) -> bool:
        return bool(self.func(Lenient(value)))


def collect_functions(module: ModuleType) -> list[FilterFunction]:
    '''returns accept/skip functions defined in the module, in definition order'''
    out: list[FilterFunction] = []
    for name, member in vars(module).items():
        if not inspect.isfunction(member) or name.startswith('_'): continue
        if member.__module__ != module.__name__: continue  # imported helper
        function = FilterFunction.from_callable(member, name)
        if function is None or not (function.is_accept or function.is_skip): continue
        out.append(function)
    return out


class FilterSet:
    '''a group of predicate functions applied as a single filter'''

    def __init__(self, functions: Iterable[FilterFunction] = ()):
        self.functions: list[FilterFunction] = list(functions)

    @classmethod
    def from_modules(cls, *modules: ModuleType) -> 'FilterSet':
        return cls(f for m in modules for f in collect_functions(m))

    def add(self, func: Callable[[Any], Any]) -> Callable[[Any], Any]:
        '''registers a single function; usable as a decorator'''
        function = FilterFunction.from_callable(func)
        if function is None: raise ValueError(f'{func!r} must take the filtered value as its first parameter')
        self.functions.append(function)
        return func

    def __len__(self) -> int: return len(self.functions)

    def accepts(self, target: Target, value: Any) -> bool:
        return self._evaluate(target, value, accept=True)

    def skips(self, target: Target, value: Any) -> bool:
        return self._evaluate(target, value, accept=False)

    def accept_diff(self, value: Any) -> bool: return self.accepts(Target.DIFF, value)
    def skip_diff(self, value: Any) -> bool: return self.skips(Target.DIFF, value)
    def accept_block(self, value: Any) -> bool: return self.accepts(Target.BLOCK, value)
    def skip_block(self, value: Any) -> bool: return self.skips(Target.BLOCK, value)
    def accept_line(self, value: Any) -> bool: return self.accepts(Target.LINE, value)
    def skip_line(self, value: Any) -> bool: return self.skips(Target.LINE, value)
    def accept_fragments(self, value: Any) -> bool: return self.accepts(Target.FRAGMENT_PAIR, value)
    def skip_fragments(self, value: Any) -> bool: return self.skips(Target.FRAGMENT_PAIR, value)
    def accept_fragment(self, value: Any) -> bool: return self.accepts(Target.FRAGMENT, value)
    def skip_fragment(self, value: Any) -> bool: return self.skips(Target.FRAGMENT, value)

    def _evaluate(self, target: Target, value: Any, accept: bool) -> bool:
        if target is Target.UNDEFINED: return False
        for function in self.functions:
            if function.target is not target: continue
            if not (function.is_accept if accept else function.is_skip): continue
            try:
                matched = function(value)
            except Exception:
                logger.exception('Filter %s failed on %r', function.name, value)
                continue  # a failing function does not match
            if matched:
                logger.debug('Filter %s matched %r', function.name, value)
                return True
        return False
