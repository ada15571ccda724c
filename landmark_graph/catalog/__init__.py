from ..registry import AnalysisRegistry
from .basic import basic
from .bjork import bjork
from .common import common
from .dental import dental
from .downs import downs
from .soft_tissues import soft_tissues

DEFAULT_REGISTRY = AnalysisRegistry([common, basic, downs, bjork, dental, soft_tissues])

__all__ = [
    'DEFAULT_REGISTRY',
    'basic',
    'bjork',
    'common',
    'dental',
    'downs',
    'soft_tissues',
]
