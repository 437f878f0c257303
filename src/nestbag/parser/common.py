from __future__ import annotations

from lark import Transformer

from nestbag.objects.element import Label, Nested
from nestbag.objects.multiset import MultiSet


# NOTE: a label runs up to the next "," or "}", so the whitespace inside and at the end
# of a label is kept, while the whitespace before it is ignored, e.g.,
# "{ a b , c}" contains the labels "a b " and "c"
common_grammar = r"""
    multiset: "{" (element ("," element)*)? "}"
    ?element: nested | label
    nested: multiset
    label: LABEL

    LABEL: /[^\s,{}][^,}]*/

    %import common.WS
    %ignore WS
"""


class CommonTransformer(Transformer):
    def __init__(self, visit_tokens: bool = True) -> None:
        super().__init__(visit_tokens)

    def multiset(self, args):
        ret = MultiSet()
        for element in args:
            ret.add(element)
        return ret

    def nested(self, args):
        return Nested(args[0])

    def label(self, args):
        return Label(str(args[0]))
