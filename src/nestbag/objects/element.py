from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nestbag.objects.multiset import MultiSet


"""
NOTE: an element of a multiset is either a label or another multiset, e.g.,
{a, b, {a, b}}
contains the labels `a` and `b` and one nested multiset `{a, b}`.

The nested multiset is held by reference, so the same MultiSet instance can be
an element of several parents. Two elements are the same iff they have the same
kind and the same content, i.e., nested multisets are compared and hashed by what
they contain, never by their identity. A label is never equal to a nested multiset,
even if the nested multiset only contains that label (`1 != {1}`).
"""
class Element(object):
    """
    Base class of the elements of a multiset
    """
    def __hash__(self) -> int:
        raise NotImplementedError

    def __eq__(self, o: object) -> bool:
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return str(self)


class Label(Element):
    def __init__(self, name: str):
        super().__init__()
        self.name: str = name

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Label):
            return self.name == o.name
        return False

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Label({self.name!r})"


class Nested(Element):
    def __init__(self, multiset: MultiSet):
        """
        :param multiset: the nested multiset, shared with the caller rather than copied
        """
        super().__init__()
        self.multiset: MultiSet = multiset

    def __hash__(self) -> int:
        # content hash of the nested multiset, see MultiSet.__hash__
        return hash(self.multiset)

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Nested):
            # compare the content of the multisets, not the references
            return self.multiset == o.multiset
        return False

    def __str__(self) -> str:
        return str(self.multiset)

    def __repr__(self) -> str:
        return f"Nested({self.multiset})"
