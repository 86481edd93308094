'''Bswp core utilities, entrypoint for swapping files and standard streams'''
# --------------------
import os
import sys
import contextlib
# --------------------
import yaml
try:
    from yaml import CDumper as ymlDumper
except ImportError:
    from yaml import Dumper as ymlDumper
# --------------------
from bswp.errors import InvalidConfiguration, check_integer
from bswp.logging import Logger
from bswp.files import create_file_directory, file_size
from bswp.io import BUFFER_SIZE, swap_io
from bswp.rules import load_rules_file, parse_expression
# --------------------
StandardStream = '-'
# --------------------
def collect_rules(rules_file=None, expressions=()):
    '''Gather a ruleset from a rule file and rule expressions.

    File rules come first, expressions are appended in order.

    :param rules_file: YAML rule file, if any
    :param expressions: compact rule expressions
    :type rules_file: str or None
    :type expressions: iterable(str)
    :rtype: list(tuple(:class:`bswp.patterns.GenericPattern`, :class:`bswp.localities.GenericLocality`))
    '''
    swaps = load_rules_file(rules_file) if rules_file is not None else []
    swaps.extend(parse_expression(expr) for expr in expressions)
    return swaps
# --------------------
class SwapOptions:
    '''Options for bswp executions.

    Built in the following priority order: kwargs -> args -> default.
    Unless specified otherwise, the input attribute name of key name is
    identical to the option attribute name.

    :param input: file to swap, :code:`-` for the standard input, default :code:`-`
    :param output: file to write the swapped bytes to, :code:`-` for the standard output, default :code:`-`
    :param buffer_size: size of the transfer buffer, default :code:`bswp.io.BUFFER_SIZE`
    :param rules: ordered ruleset, reads from :code:`args.rules_file` and :code:`args.expressions`, default empty
    :param report_file: YAML file receiving the run results, reads from :code:`args.report`, default None
    :param log: logging option flags, reads from :code:`log_debug`, :code:`log_color` and :code:`log_progress` (except: :code:`args.debug`), default to False

    :type input: str
    :type output: str
    :type buffer_size: int
    :type rules: list(tuple(:class:`bswp.patterns.GenericPattern`, :class:`bswp.localities.GenericLocality`))
    :type report_file: str or None
    :type log: dict(str, bool)
    '''

    def __init__(self, args=None, **kwargs):
        self.input = (kwargs['input'] if 'input' in kwargs else
                      args.input if args is not None else
                      StandardStream)
        self.output = (kwargs['output'] if 'output' in kwargs else
                       args.output if args is not None else
                       StandardStream)
        self.buffer_size = check_integer('buffer size',
                                         kwargs['buffer_size'] if 'buffer_size' in kwargs else
                                         args.buffer_size if args is not None else
                                         BUFFER_SIZE, 1)
        self.rules = (list(kwargs['rules']) if 'rules' in kwargs else
                      collect_rules(args.rules_file, args.expressions) if args is not None else
                      [])
        self.report_file = (kwargs['report_file'] if 'report_file' in kwargs else
                            args.report if args is not None else
                            None)

        self.log = {
            'debug': (kwargs['log_debug'] if 'log_debug' in kwargs else
                      args.debug if args is not None else
                      False),
            'color': (kwargs['log_color'] if 'log_color' in kwargs else
                      args.log_color if args is not None else
                      False),
            'progress': (kwargs['log_progress'] if 'log_progress' in kwargs else
                         args.log_progress if args is not None else
                         False),
        }

    def create_logger(self):
        '''Create a logger from current options.

        :rtype: :class:`bswp.logging.Logger`
        '''
        return Logger(level=4 if self.log['debug'] else 3, color=self.log['color'], log_progress=self.log['progress'])
# --------------------
class ProgressReader:
    '''Reader wrapper reporting the bytes read to a progress bar.

    :param reader: wrapped byte source
    :param bar: progress bar, updated with the size of each chunk
    '''

    def __init__(self, reader, bar):
        self.reader = reader
        self.bar = bar

    def readinto(self, buffer):
        size = self.reader.readinto(buffer)
        if size:
            self.bar.update(size)
        return size
# --------------------
class Swapper:
    '''Main class for running a complete bswp swap.

    :param opts: options for the swap
    :param log: logging utility class
    :param results: swap summary, set after call
    :type opts: :class:`bswp.SwapOptions`
    :type results: dict
    '''

    def __init__(self, opts, logger=None):
        self.opts = opts
        self.log = logger if logger is not None else opts.create_logger()
        self.results = {}

    def export_results(self, target):
        '''Export the results to the target file descriptor.

        :param target: target to write the results to
        :type target: fp('w')
        '''
        yaml.dump(self.results, target, Dumper=ymlDumper, sort_keys=False)

    def __call__(self):
        '''Run the swap.

        :return: number of bytes swapped
        :rtype: int
        :raises InvalidConfiguration: if input and output are the same file
        :raises OSError: if reading the input or writing the output fails
        '''
        self.log.debug('initializing bswp swapper')
        if self._same_file():
            raise InvalidConfiguration('input and output are the same file', self.opts.output)
        if not self.opts.rules:
            self.log.warning('no swap rule given, output will be a copy of the input')
        for pattern, locality in self.opts.rules:
            self.log.debug(f'rule: {pattern!r} on {locality!r}')
        self.log.info(f'swapping {self.opts.input} into {self.opts.output} ({len(self.opts.rules)} rules)')

        try:
            with self._open_input() as reader, self._open_output() as writer:
                count = self._swap(reader, writer)
                writer.flush()
        except OSError as e:
            self.log.error(f'swap aborted: {e}')
            raise

        self.results = {
            'input': self.opts.input,
            'output': self.opts.output,
            'bytes': count,
            'rules': len(self.opts.rules),
        }
        self.log.result(f'swapped {count} bytes')

        if self.opts.report_file is not None:
            create_file_directory(self.opts.report_file)
            with open(self.opts.report_file, 'w') as stream:
                self.export_results(stream)
            self.log.debug(f'results written to {self.opts.report_file}')
        return count

    def _same_file(self):
        if StandardStream in (self.opts.input, self.opts.output):
            return False
        # truncating the output would wipe the input before it is read
        return (os.path.exists(self.opts.input) and os.path.exists(self.opts.output)
                and os.path.samefile(self.opts.input, self.opts.output))

    def _swap(self, reader, writer):
        if not self.log.log_progress:
            return swap_io(reader, writer, self.opts.rules, self.opts.buffer_size)
        size = file_size(self.opts.input) if self.opts.input != StandardStream else None
        bar = self.log.progress_bar(size)
        try:
            return swap_io(ProgressReader(reader, bar), writer, self.opts.rules, self.opts.buffer_size)
        finally:
            bar.close()

    def _open_input(self):
        if self.opts.input == StandardStream:
            return contextlib.nullcontext(sys.stdin.buffer)
        return open(self.opts.input, 'rb')

    def _open_output(self):
        if self.opts.output == StandardStream:
            return contextlib.nullcontext(sys.stdout.buffer)
        create_file_directory(self.opts.output)
        return open(self.opts.output, 'wb')
# --------------------
