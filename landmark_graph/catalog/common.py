"""All bundled measurements in one analysis.

Several constructions appear here under more than one symbol (``MP`` and
``GoMe``, ``FMPA`` and ``MP-FH``, ``SN^MP`` and ``SN-GoMe``); the
equivalence index lets each pair satisfy the other.
"""

from ..analysis import Analysis, merge_components
from ..interpret import combine_interpreters
from .basic import basic
from .bjork import bjork
from .dental import dental
from .downs import downs
from .soft_tissues import soft_tissues

_parts = (basic, downs, bjork, dental, soft_tissues)

common = Analysis(
    "common",
    merge_components(*(part.components for part in _parts)),
    combine_interpreters(*(part.interpret for part in _parts)),
    name="Common analysis",
)
