import argparse

import logging
import logzero
from logzero import logger
from contexttimer import Timer

from nestbag.parser.parser import MultisetParsingError, parse_program
from nestbag.program import Program


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Evaluate the expressions over nested multisets')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--input_file', '-i', type=str, help='input file')
    source.add_argument('--expression', '-e', type=str, help='program given inline')
    parser.add_argument('--bindings', '-b', action='store_true', help='print the named multisets')
    parser.add_argument('--debug', '-d', action='store_true', help='debug mode')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.debug:
        logzero.loglevel(logging.DEBUG)
    else:
        logzero.loglevel(logging.INFO)
    if args.input_file is not None:
        logger.info(f'Input file: {args.input_file}')
        with open(args.input_file, 'r') as f:
            text = f.read()
    else:
        text = args.expression
    with Timer() as t:
        try:
            program: Program = parse_program(text)
        except MultisetParsingError as e:
            logger.error(e)
            return 1
    logger.info(f'Evaluated in {t.elapsed:.4f}s')
    for multiset in program.results:
        print(multiset)
    if args.bindings:
        for name, multiset in program.bindings.items():
            print(f'{name} = {multiset}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
