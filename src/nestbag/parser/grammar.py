from nestbag.parser.common import common_grammar


nestbag_grammar = r"""
    nestbag: statement*
    ?statement: assignment | expression_statement

    assignment: left_identity expr
    left_identity: NAME "="
    expression_statement: expr

    ?expr: term
        | expr UNION_OP term -> binary_operation
        | expr DIFFERENCE_OP term -> binary_operation
    ?term: atom
        | term INTERSECTION_OP atom -> binary_operation
    ?atom: "(" expr ")"
        | multiset
        | identity
        | support
    support: SUPP "(" expr ")"
    identity: NAME

    SUPP: "supp"
    UNION_OP: "+"
    INTERSECTION_OP: "*"
    DIFFERENCE_OP: "-"

    %import common.CNAME -> NAME
"""

grammar = nestbag_grammar + common_grammar
