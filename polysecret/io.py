'share-set file loading'
import json
from collections import namedtuple
from os import PathLike
from typing import Union, TextIO

from .decode import decode, DecodeError
from .sss import Share

FileLike = Union[str, bytes, PathLike]

ShareSet = namedtuple('ShareSet', 'n k shares')

KEYS = 'keys'


class MalformedShareSet(ValueError):
    pass


class _Pairs(list):
    'a JSON object whose keys repeat, kept as (key, value) pairs in document order'


def _keep_pairs(pairs):
    names = [name for name, _ in pairs]
    if len(set(names)) == len(names):
        return dict(pairs)
    return _Pairs(pairs)


def _int(val, what):
    "ints pass through, strings must be ASCII decimal digits with an optional '-'"
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    if isinstance(val, str):
        sign, digits = (-1, val[1:]) if val.startswith('-') else (1, val)
        try:
            return sign * decode(digits, 10)
        except DecodeError:
            pass
    raise MalformedShareSet(f'{what} must be an integer, got {val!r}.')


def parse(doc) -> ShareSet:
    """
    Build a ShareSet from a decoded share-set document:

        {"keys": {"n": 4, "k": 3},
         "1": {"base": "10", "value": "4"},
         "2": {"base": "2", "value": "111"}, ...}

    every key besides "keys" names a share by its x coordinate. A document whose share
    ids repeat may be given as a list of (key, value) pairs; every share is kept.
    """
    if isinstance(doc, dict):
        items = list(doc.items())
    elif isinstance(doc, _Pairs):
        items = list(doc)
    else:
        raise MalformedShareSet('Share set must be a JSON object.')
    keys = [v for name, v in items if name == KEYS]
    if len(keys) > 1:
        raise MalformedShareSet('Share set has more than one "keys" object.')
    keys = keys[0] if keys else None
    if not isinstance(keys, dict) or 'n' not in keys or 'k' not in keys:
        raise MalformedShareSet('Share set needs a "keys" object with "n" and "k".')
    n = _int(keys['n'], '"keys.n"')
    k = _int(keys['k'], '"keys.k"')

    shares = []
    for name, entry in items:
        if name == KEYS:
            continue
        x = _int(name, f'Share id {name!r}')
        if isinstance(entry, _Pairs):
            raise MalformedShareSet(f'Share {name} repeats a field.')
        if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
            raise MalformedShareSet(f'Share {name} needs a "base" and a "value".')
        base = _int(entry['base'], f'Base of share {name}')
        value = entry['value']
        if not isinstance(value, str):
            raise MalformedShareSet(f'Value of share {name} must be a string of digits.')
        shares.append(Share(x, base, value))
    return ShareSet(n, k, shares)


def load(stream: TextIO) -> ShareSet:
    'read a share set from a JSON text stream'
    try:
        doc = json.load(stream, object_pairs_hook=_keep_pairs)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedShareSet(f'Share set is not valid JSON: {e}') from None
    return parse(doc)


def from_file(path: FileLike) -> ShareSet:
    with open(path, 'r', encoding='utf8') as fin:
        return load(fin)
