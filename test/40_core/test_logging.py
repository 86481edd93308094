# -------------------------------------
import io
from bswp.logging import Logger, DummyProgressBar
# -------------------------------------
def create_logger(level, color=False):
    err = io.StringIO()
    return Logger(level, color, False, err=err), err
# -------------------------------------
def test_levels():
    log, err = create_logger(2)
    log.debug('d')
    log.info('i')
    log.warning('w')
    log.error('e')
    log.fatal('f')
    log.result('r')
    assert err.getvalue().splitlines() == ['[warning]: w', '[error]  : e', '[fatal]  : f', '[result] : r']
# -------------------------------------
def test_result_always_shown():
    log, err = create_logger(0)
    log.error('e')
    log.result('r')
    assert err.getvalue() == '[result] : r\n'
# -------------------------------------
def test_set_level():
    log, err = create_logger(0)
    log.info('hidden')
    log.set_level(4)
    log.debug('shown')
    assert err.getvalue() == '[debug]  : shown\n'
# -------------------------------------
def test_color():
    log, err = create_logger(4, True)
    log.error('e')
    assert '\x1b[' in err.getvalue()
    assert 'e' in err.getvalue()
# -------------------------------------
def test_capture():
    log, err = create_logger(4)
    log.capture()
    log.info('first')
    log.warning('second')
    assert err.getvalue() == ''
    log.uncapture()
    assert err.getvalue().splitlines() == ['[info]   : first', '[warning]: second']
    log.info('third')
    assert err.getvalue().splitlines()[-1] == '[info]   : third'
# -------------------------------------
def test_progress_disabled():
    log, _ = create_logger(4)
    assert isinstance(log.progress_bar(10), DummyProgressBar)
    assert list(log.progress(range(3))) == [0, 1, 2]
# -------------------------------------
def test_progress_enabled():
    err = io.StringIO()
    log = Logger(4, False, True, err=err)
    bar = log.progress_bar(10)
    bar.update(10)
    bar.close()
    assert not isinstance(bar, DummyProgressBar)
# -------------------------------------
