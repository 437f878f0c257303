from __future__ import annotations

from typing import TextIO

from nestbag.objects.multiset import MultiSet
from nestbag.parser.parser import parse


def loads(text: str) -> MultiSet:
    return parse(text)


def load(fp: TextIO) -> MultiSet:
    """
    Read a multiset from a text stream, the whole stream must be a single multiset

    :param fp: the stream
    :return: the multiset
    :raise MalformedInputError: If the content is not a well-formed multiset.
    """
    return parse(fp.read())


def dumps(multiset: MultiSet) -> str:
    return str(multiset)


def dump(multiset: MultiSet, fp: TextIO) -> None:
    fp.write(dumps(multiset))
