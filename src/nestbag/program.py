from __future__ import annotations

from nestbag.objects.multiset import MultiSet


class Program(object):
    def __init__(
        self, bindings: dict[str, MultiSet] = None,
        results: list[MultiSet] = None
    ) -> None:
        super().__init__()
        # the named multisets, in the order they are bound
        self.bindings: dict[str, MultiSet] = bindings
        # the values of the expressions that are not bound to a name
        self.results: list[MultiSet] = results
        if self.bindings is None:
            self.bindings = dict()
        if self.results is None:
            self.results = list()

    def bind(self, name: str, multiset: MultiSet) -> None:
        self.bindings[name] = multiset

    def __getitem__(self, name: str) -> MultiSet:
        return self.bindings[name]

    def __contains__(self, name: str) -> bool:
        return name in self.bindings

    def __str__(self) -> str:
        s = ''
        s += 'Bindings: \n'
        for name, multiset in self.bindings.items():
            s += f'\t{name} = {multiset}\n'
        s += 'Results: \n'
        for multiset in self.results:
            s += f'\t{multiset}\n'
        return s

    def __repr__(self) -> str:
        return str(self)
