import configparser
from fractions import Fraction
from logging import getLogger, StreamHandler, FileHandler, Formatter, INFO, DEBUG


DEFAULTS = {'max_order': '10',
            'subtract_mean': 'yes',
            'hierarchy': 'no',
            'criterion': 'aic',
            'logfile_path': ''}


def load_config(inifile_path):
    """Read the [general] section of an .ini file on top of DEFAULTS.

    A missing file or section leaves the defaults untouched.

    """
    parser = configparser.ConfigParser(defaults=DEFAULTS)
    parser.read(inifile_path)

    s = parser['general'] if 'general' in parser else parser[parser.default_section]

    return {'max_order': s.getint('max_order'),
            'subtract_mean': s.getboolean('subtract_mean'),
            'hierarchy': s.getboolean('hierarchy'),
            'criterion': s.get('criterion'),
            'logfile_path': s.get('logfile_path') or None}


def load_series(path, exact=False):
    """Load one observation per line.

    Blank lines and `#` comments are skipped, and only the first column of
    comma separated lines is used.

    """
    cast = Fraction if exact else float

    x = []
    with open(path) as f:
        for line in f:
            line = line.split('#', 1)[0].strip()
            if not line:
                continue
            x.append(cast(line.split(',')[0].strip()))

    return x


def setup_logger(logfile_path=None, verbose=False):
    logger = getLogger('ARBurg')
    logger.setLevel(DEBUG if verbose else INFO)

    # repeated invocations in one process must not stack handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    handler = StreamHandler() if logfile_path is None else FileHandler(logfile_path)
    handler.setFormatter(Formatter('%(asctime)s [%(levelname)s] %(message)s'))
    handler.setLevel(DEBUG if verbose else INFO)
    logger.addHandler(handler)

    return logger
