from typing import Any, Protocol, runtime_checkable

# predicates only rely on these capabilities, never on a concrete class

@runtime_checkable
class Fragment(Protocol):
    '''span of markup text, e.g. a changed word inside an HTML line'''
    def is_attribute_value(self, name: str) -> bool: ...  # value of attribute `name`
    def is_tag_content(self, name: str) -> bool: ...  # text between the tags of `name`
    def __str__(self) -> str: ...

@runtime_checkable
class Line(Protocol):
    '''left and right side of one compared line'''
    def get_left(self) -> str: ...
    def get_right(self) -> str: ...


def _stub(*args, **kwargs) -> None:
    return None


class Lenient:
    '''proxy that answers missing capability methods with a stub returning None'''

    __slots__ = ('_value',)

    def __init__(self, value: Any):
        object.__setattr__(self, '_value', value)

    def __getattr__(self, name: str) -> Any:
        if name.startswith('__'): raise AttributeError(name)  # dunders are never stubbed
        return getattr(self._value, name, _stub)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'{type(self).__name__} is read-only')

    def __str__(self) -> str: return str(self._value)

    def __repr__(self) -> str: return f'Lenient({self._value!r})'

    def unwrap(self) -> Any: return self._value
