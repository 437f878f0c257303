from nestbag.objects.element import Element, Label, Nested
from nestbag.objects.multiset import ElementNotFoundError, MultiSet, to_element
from nestbag.parser.parser import MalformedInputError, MultisetParsingError, \
    UndefinedNameError, parse, parse_program
from nestbag.codec import dump, dumps, load, loads
from nestbag.program import Program
