'''File helpers for swap inputs, outputs and reports'''
# --------------------
import os
# --------------------
def create_file_directory(filename):
    '''Create the parent directories of :code:`filename` when missing.

    :param filename: path of a file about to be opened for writing
    :type filename: str
    :return: the parent directory, empty for the current directory
    :rtype: str
    '''
    dirname = os.path.dirname(filename)
    if dirname:
        os.makedirs(dirname, exist_ok=True)
    return dirname
# --------------------
def file_size(filename):
    '''Size of :code:`filename` in bytes, None for pipes, devices and missing paths.'''
    if os.path.isfile(filename):
        return os.path.getsize(filename)
    return None
# --------------------
