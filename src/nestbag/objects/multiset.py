from __future__ import annotations

from typing import Generator, Iterable, Iterator, Mapping, Union

from nestbag.objects.element import Element, Label, Nested


class ElementNotFoundError(LookupError):
    def __init__(self, element: Element):
        self.element: Element = element
        super().__init__(f"Element {element} does not exist in the multiset.")


def to_element(obj: Union[Element, str, MultiSet]) -> Element:
    """
    Convert an object to an element of a multiset

    :param obj: an element, a string (label) or a multiset (nested, by reference)
    :return: the element
    """
    if isinstance(obj, Element):
        return obj
    if isinstance(obj, str):
        return Label(obj)
    if isinstance(obj, MultiSet):
        return Nested(obj)
    raise TypeError(
        f"Expect a label, a multiset or an element, but got {obj} of type {type(obj)}."
    )


def union_multiplicity(first: dict[Element, int],
                       second: dict[Element, int]) -> dict[Element, int]:
    elements_multiplicity = dict(first)
    for element, multiplicity in second.items():
        if element in elements_multiplicity:
            elements_multiplicity[element] = max(
                elements_multiplicity[element], multiplicity
            )
        else:
            elements_multiplicity[element] = multiplicity
    return elements_multiplicity


def intersection_multiplicity(first: dict[Element, int],
                              second: dict[Element, int]) -> dict[Element, int]:
    elements_multiplicity = dict()
    for element, multiplicity in first.items():
        if element in second:
            elements_multiplicity[element] = min(multiplicity, second[element])
    return elements_multiplicity


def difference_multiplicity(first: dict[Element, int],
                            second: dict[Element, int]) -> dict[Element, int]:
    elements_multiplicity = dict()
    for element, multiplicity in first.items():
        if element in second:
            if multiplicity > second[element]:
                elements_multiplicity[element] = multiplicity - second[element]
        else:
            elements_multiplicity[element] = multiplicity
    # NOTE: the elements only in the second multiset are kept with their multiplicity,
    # e.g., {} - {x} = {x}, which differs from the usual multiset difference
    for element, multiplicity in second.items():
        if element not in first:
            elements_multiplicity[element] = multiplicity
    return elements_multiplicity


class MultiSet(object):
    """
    A multiset (bag) of labels and nested multisets.

    Every stored multiplicity is positive: an element whose multiplicity drops to
    zero is removed. Equality and hashing depend only on the content, so multisets
    built in different orders are equal and hash the same.

    NOTE: a multiset used as a nested element (or as a dict key) must not be mutated
    afterwards, since its hash would change.
    """
    def __init__(self, elements: Iterable[Union[Element, str, MultiSet]] = None) -> None:
        """
        :param elements: the elements to add, duplicates increase the multiplicity
        """
        super().__init__()
        self.elements_multiplicity: dict[Element, int] = dict()
        if elements is not None:
            for element in elements:
                self.add(element)

    @property
    def elements(self) -> dict[Element, int]:
        """
        A copy of the mapping from the distinct elements to their multiplicities
        """
        return dict(self.elements_multiplicity)

    @elements.setter
    def elements(self, elements_multiplicity: Mapping[Union[Element, str, MultiSet], int]) -> None:
        new_elements_multiplicity: dict[Element, int] = dict()
        for obj, multiplicity in elements_multiplicity.items():
            element = self._check_element(to_element(obj))
            # bool is a subclass of int, but not a multiplicity
            if not isinstance(multiplicity, int) or isinstance(multiplicity, bool):
                raise TypeError(
                    f"The multiplicity of {element} must be an integer, but got {multiplicity!r}."
                )
            if multiplicity < 1:
                raise ValueError(
                    f"The multiplicity of {element} must be positive, but got {multiplicity}."
                )
            new_elements_multiplicity[element] = \
                new_elements_multiplicity.get(element, 0) + multiplicity
        self.elements_multiplicity = new_elements_multiplicity

    def _check_element(self, element: Element) -> Element:
        if isinstance(element, Nested) and element.multiset is self:
            raise ValueError("A multiset cannot contain itself.")
        return element

    def add(self, element: Union[Element, str, MultiSet]) -> None:
        element = self._check_element(to_element(element))
        if element in self.elements_multiplicity:
            self.elements_multiplicity[element] += 1
        else:
            self.elements_multiplicity[element] = 1

    def remove(self, element: Union[Element, str, MultiSet]) -> None:
        """
        Remove one occurrence of the element

        :param element: the element
        :raise ElementNotFoundError: If the element is not in the multiset.
        """
        element = to_element(element)
        if element not in self.elements_multiplicity:
            raise ElementNotFoundError(element)
        self.elements_multiplicity[element] -= 1
        if self.elements_multiplicity[element] == 0:
            del self.elements_multiplicity[element]

    def contains(self, element: Union[Element, str, MultiSet]) -> bool:
        return to_element(element) in self.elements_multiplicity

    def multiplicity(self, element: Union[Element, str, MultiSet]) -> int:
        """
        Get the multiplicity of the element in the multiset

        :param element: the element
        :return: the multiplicity, 0 if the element is not in the multiset
        """
        return self.elements_multiplicity.get(to_element(element), 0)

    def is_empty(self) -> bool:
        return len(self.elements_multiplicity) == 0

    def size(self) -> int:
        """
        The number of elements counted with multiplicity
        """
        return sum(self.elements_multiplicity.values())

    def build_boolean(self) -> MultiSet:
        """
        The support of the multiset, i.e., every distinct element with multiplicity 1
        """
        boolean_multiset = MultiSet()
        boolean_multiset.elements_multiplicity = dict(
            (element, 1) for element in self.elements_multiplicity
        )
        return boolean_multiset

    def copy(self) -> MultiSet:
        # nested multisets are shared with the copy
        ret = MultiSet()
        ret.elements_multiplicity = dict(self.elements_multiplicity)
        return ret

    def items(self) -> Generator[tuple[Element, int], None, None]:
        return self.elements_multiplicity.items()

    def keys(self) -> Generator[Element, None, None]:
        return self.elements_multiplicity.keys()

    def values(self) -> Generator[int, None, None]:
        return self.elements_multiplicity.values()

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements_multiplicity)

    def __contains__(self, element: Union[Element, str, MultiSet]) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, o: object) -> bool:
        if isinstance(o, MultiSet):
            return self.elements_multiplicity == o.elements_multiplicity
        return False

    def __hash__(self) -> int:
        # XOR is independent of the iteration order of the elements
        hash_value = 0
        for element, multiplicity in self.elements_multiplicity.items():
            hash_value ^= hash(element) ^ (hash(multiplicity) << 1)
        return hash_value

    @staticmethod
    def _from_multiplicity(elements_multiplicity: dict[Element, int]) -> MultiSet:
        ret = MultiSet()
        ret.elements_multiplicity = elements_multiplicity
        return ret

    def __add__(self, other: MultiSet) -> MultiSet:
        if not isinstance(other, MultiSet):
            return NotImplemented
        return self._from_multiplicity(union_multiplicity(
            self.elements_multiplicity, other.elements_multiplicity
        ))

    def __iadd__(self, other: MultiSet) -> MultiSet:
        if not isinstance(other, MultiSet):
            return NotImplemented
        self.elements_multiplicity = union_multiplicity(
            self.elements_multiplicity, other.elements_multiplicity
        )
        return self

    def __mul__(self, other: MultiSet) -> MultiSet:
        if not isinstance(other, MultiSet):
            return NotImplemented
        return self._from_multiplicity(intersection_multiplicity(
            self.elements_multiplicity, other.elements_multiplicity
        ))

    def __imul__(self, other: MultiSet) -> MultiSet:
        if not isinstance(other, MultiSet):
            return NotImplemented
        self.elements_multiplicity = intersection_multiplicity(
            self.elements_multiplicity, other.elements_multiplicity
        )
        return self

    def __sub__(self, other: MultiSet) -> MultiSet:
        if not isinstance(other, MultiSet):
            return NotImplemented
        return self._from_multiplicity(difference_multiplicity(
            self.elements_multiplicity, other.elements_multiplicity
        ))

    def __isub__(self, other: MultiSet) -> MultiSet:
        if not isinstance(other, MultiSet):
            return NotImplemented
        self.elements_multiplicity = difference_multiplicity(
            self.elements_multiplicity, other.elements_multiplicity
        )
        return self

    def __str__(self) -> str:
        # repeated elements are written repeatedly, e.g., {a, a, b}
        return "{" + ", ".join(
            str(element) for element, multiplicity in self.items()
            for _ in range(multiplicity)
        ) + "}"

    def __repr__(self) -> str:
        return f"MultiSet({self})"
