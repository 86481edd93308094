'''Ruleset description formats: YAML rule files and compact rule expressions'''
# --------------------
import yaml
try:
    from yaml import CSafeLoader as ymlLoader, CDumper as ymlDumper
except ImportError:
    from yaml import SafeLoader as ymlLoader, Dumper as ymlDumper
# --------------------
from bswp.errors import InvalidConfiguration
from bswp.patterns import BytePattern, BitflipPattern, NoPattern
from bswp.localities import Locality, PositionsLocality, NowhereLocality
# --------------------
Patterns = {
    'mask': BytePattern,
    'bitflip': BitflipPattern,
    'none': NoPattern,
}
Localities = {
    'periodic': Locality,
    'positions': PositionsLocality,
    'nowhere': NowhereLocality,
}
# --------------------
def _build(registry, kind, default, description):
    if not isinstance(description, dict):
        raise InvalidConfiguration(f'{kind} must be a mapping', description)
    params = dict(description)
    key = params.pop('type', default)
    if not isinstance(key, str) or key not in registry:
        raise InvalidConfiguration(f'unknown {kind} type', key)
    try:
        return registry[key](**params)
    except TypeError as e:
        raise InvalidConfiguration(f'invalid {kind} parameters ({e})', description) from e
# --------------------
def build_pattern(description):
    '''Build a pattern from its dictionary description.

    :param description: pattern parameters, :code:`type` selects the class (default :code:`mask`)
    :type description: dict
    :rtype: :class:`bswp.patterns.GenericPattern`
    :raises InvalidConfiguration: on unknown types or invalid parameters
    '''
    return _build(Patterns, 'pattern', 'mask', description)
# --------------------
def build_locality(description):
    '''Build a locality from its dictionary description.

    :param description: locality parameters, :code:`type` selects the class (default :code:`periodic`)
    :type description: dict
    :rtype: :class:`bswp.localities.GenericLocality`
    :raises InvalidConfiguration: on unknown types or invalid parameters
    '''
    return _build(Localities, 'locality', 'periodic', description)
# --------------------
def build_rules(config):
    '''Build a ruleset from a loaded rule file.

    :param config: rule file content, with a :code:`rules` list
    :type config: dict
    :return: the ordered ruleset
    :rtype: list(tuple(:class:`bswp.patterns.GenericPattern`, :class:`bswp.localities.GenericLocality`))
    '''
    if not isinstance(config, dict) or not isinstance(config.get('rules'), list):
        raise InvalidConfiguration('rule file must define a list of rules')
    swaps = []
    for idx, rule in enumerate(config['rules']):
        if not isinstance(rule, dict) or 'pattern' not in rule:
            raise InvalidConfiguration(f'rule {idx} must define a pattern', rule)
        unknown = set(rule) - {'pattern', 'locality'}
        if unknown:
            raise InvalidConfiguration(f'rule {idx} has unknown fields', sorted(unknown))
        swaps.append((build_pattern(rule['pattern']), build_locality(rule.get('locality', {}))))
    return swaps
# --------------------
def load_rules(stream):
    '''Load a ruleset from a YAML stream.

    :param stream: YAML text or readable stream
    :rtype: list(tuple(:class:`bswp.patterns.GenericPattern`, :class:`bswp.localities.GenericLocality`))
    :raises InvalidConfiguration: on malformed rules
    :raises yaml.YAMLError: on malformed YAML
    '''
    return build_rules(yaml.load(stream, Loader=ymlLoader))
# --------------------
def load_rules_file(filename):
    '''Load a ruleset from a YAML file.

    :type filename: str
    '''
    with open(filename, 'r') as stream:
        return load_rules(stream)
# --------------------
def dump_rules(swaps, stream=None):
    '''Write a ruleset as YAML.

    :param swaps: ordered ruleset
    :param stream: target stream, the YAML text is returned if None
    :rtype: str or None
    '''
    config = {'rules': [{'pattern': pattern.to_dict(), 'locality': locality.to_dict()}
                        for pattern, locality in swaps]}
    return yaml.dump(config, stream, Dumper=ymlDumper, sort_keys=False)
# --------------------
def parse_expression(expression):
    '''Parse a compact rule expression.

    Expressions read :code:`VALUE:MASK[:PERIODICITY[:OFFSET[:LIMIT]]]`, each
    field being an integer literal in any base (:code:`0x42`, :code:`66`, :code:`0b1000010`).

    .. code-block:: python

        parse_expression('0x42:0xff:2:1')   # (BytePattern(0x42, 0xff), Locality(2, 1))

    :type expression: str
    :rtype: tuple(:class:`bswp.patterns.BytePattern`, :class:`bswp.localities.Locality`)
    :raises InvalidConfiguration: on malformed expressions
    '''
    fields = expression.strip().split(':')
    if not 2 <= len(fields) <= 5:
        raise InvalidConfiguration('rule expression must read VALUE:MASK[:PERIODICITY[:OFFSET[:LIMIT]]]', expression)
    try:
        values = [int(field, 0) for field in fields]
    except ValueError as e:
        raise InvalidConfiguration('rule expression fields must be integers', expression) from e
    return BytePattern(*values[:2]), Locality(*values[2:])
# --------------------
