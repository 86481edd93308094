'''Command line entrypoint: bswp'''
# --------------------
import argparse
# --------------------
import yaml
# --------------------
from bswp.core import SwapOptions, Swapper
from bswp.errors import InvalidConfiguration
from bswp.io import BUFFER_SIZE
from bswp.logging import Logger
# --------------------
def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='bswp', description='swap bytes of a stream using masked patterns at periodic positions')
    parser.add_argument('-i', '--input', default='-', help='file to swap (default: standard input)')
    parser.add_argument('-o', '--output', default='-', help='output file (default: standard output)')
    parser.add_argument('-e', '--expression', dest='expressions', action='append', default=[], metavar='EXPR',
                        help='swap rule VALUE:MASK[:PERIODICITY[:OFFSET[:LIMIT]]], repeatable, applied in order')
    parser.add_argument('-r', '--rules', dest='rules_file', default=None, metavar='RULES',
                        help='YAML rule file, its rules are applied before expressions')
    parser.add_argument('--buffer-size', type=int, default=BUFFER_SIZE, help=f'transfer buffer size (default: {BUFFER_SIZE})')
    parser.add_argument('--report', default=None, help='write a YAML summary of the run to this file')
    parser.add_argument('--debug', action='store_true', help='log debug messages')
    parser.add_argument('--log-color', action='store_true', help='colorize log messages')
    parser.add_argument('--log-progress', action='store_true', help='display a progress bar')
    args = parser.parse_args(argv)
    if args.rules_file is None and not args.expressions:
        parser.error('at least one rule is required (--expression or --rules)')
    return args
# --------------------
def main(argv=None):
    args = parse_args(argv)
    log = Logger(level=4 if args.debug else 3, color=args.log_color, log_progress=args.log_progress)
    try:
        opts = SwapOptions(args)
        Swapper(opts, log)()
    except (InvalidConfiguration, OSError, yaml.YAMLError) as e:
        log.fatal(str(e))
        return 1
    return 0
# --------------------
