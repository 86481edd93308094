'''Colored console logging and progress bars for bswp runs'''
# --------------------
import sys
from colorama import Fore, Style
from tqdm import tqdm
# --------------------
LogLevels = (
    ('debug', 4), ('info', 3), ('warning', 2), ('error', 1),
    ('critical', 0), ('fatal', 0), ('result', 0),
)
# --------------------
class DummyProgressBar:
    '''Progress bar doing nothing, used when progress logging is disabled.'''

    def __init__(self, total=None):
        self.total = total

    def update(self, n=1):
        pass

    def close(self):
        pass
# --------------------
class Logger:
    '''Logging utility class.

    Each level is a method taking the message to log, messages are written to
    :code:`err` as :code:`[level]: message`. Messages above :code:`level` are
    dropped, results are always written.

    :param level: verbosity, from 0 (fatal only) to 4 (debug)
    :param color: colorize output
    :param log_progress: display progress bars
    :param err: logging stream
    :type level: int
    :type color: bool
    :type log_progress: bool
    '''

    def __init__(self, level=4, color=False, log_progress=True, err=sys.stderr):
        self.level = level
        self.color = color
        self.log_progress = log_progress
        self.err = err
        self._on_capture = False
        self._captured_msg = []
        self._set_loggers()

    def set_level(self, level):
        self.level = level
        self._set_loggers()

    def set_progress(self, log_progress):
        self.log_progress = log_progress
        self._set_loggers()

    def set_color(self, color):
        self.color = color
        self._set_loggers()

    def no_output(self):
        pass

    def output(self, log, ltxt='[       ]', color_a='', color_b=''):
        reset = Style.RESET_ALL if self.color else ''
        self.err.write(f'{color_a}{ltxt}:{reset}{color_b} {log}{reset}\n')

    def capture(self):
        '''Hold the messages back until :code:`uncapture` is called.'''
        self._on_capture = True
        for lvl, _ in LogLevels:
            setattr(self, lvl, lambda log, lvl=lvl: self._captured_msg.append((lvl, log)))

    def uncapture(self):
        '''Replay the captured messages, in order, and stop capturing.'''
        self._on_capture = False
        self._set_loggers()
        while self._captured_msg:
            lvl, msg = self._captured_msg.pop(0)
            getattr(self, lvl)(msg)

    def _set_loggers(self):
        if self._on_capture:
            return
        if self.log_progress:
            setattr(self, 'progress', lambda i: tqdm(i))
            setattr(self, 'progress_bar', lambda total: tqdm(total=total, unit='B', unit_scale=True, file=self.err))
        else:
            setattr(self, 'progress', lambda i: i)
            setattr(self, 'progress_bar', lambda total: DummyProgressBar(total))
        if self.color:
            styles = {
                'debug': ('[debug]  ', Style.DIM, Style.DIM),
                'info': ('[info]   ', Fore.CYAN, ''),
                'warning': ('[warning]', Fore.YELLOW + Style.BRIGHT, Fore.YELLOW),
                'error': ('[error]  ', Fore.RED + Style.BRIGHT, Fore.RED),
                'critical': ('[fatal]  ', Fore.MAGENTA + Style.BRIGHT, Fore.MAGENTA),
                'fatal': ('[fatal]  ', Fore.MAGENTA + Style.BRIGHT, Fore.MAGENTA),
                'result': ('[result] ', Fore.GREEN, ''),
            }
        else:
            styles = {
                'debug': ('[debug]  ', '', ''),
                'info': ('[info]   ', '', ''),
                'warning': ('[warning]', '', ''),
                'error': ('[error]  ', '', ''),
                'critical': ('[fatal]  ', '', ''),
                'fatal': ('[fatal]  ', '', ''),
                'result': ('[result] ', '', ''),
            }
        for tlvl, lvl in LogLevels:
            if tlvl != 'result' and self.level < lvl:
                setattr(self, tlvl, lambda log: self.no_output())
            else:
                ltxt, color_a, color_b = styles[tlvl]
                setattr(self, tlvl, lambda log, ltxt=ltxt, color_a=color_a, color_b=color_b:
                        self.output(log, ltxt=ltxt, color_a=color_a, color_b=color_b))
# --------------------
