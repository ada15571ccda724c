from ..analysis import Analysis, AnalysisComponent
from ..interpret import RangeRule, interpret_with
from .constructions import distance_to_line
from .landmarks import ELine, Li, Ls

# negative when the lip lies behind the esthetic line
upper_lip = distance_to_line(Ls, ELine, "Ls-E", "Upper lip to E-line")
lower_lip = distance_to_line(Li, ELine, "Li-E", "Lower lip to E-line")

upper = AnalysisComponent(upper_lip, norm=-4.0, std_dev=2.0)
lower = AnalysisComponent(lower_lip, norm=-2.0, std_dev=2.0)

components = (upper, lower)

rules = (
    RangeRule.for_component("upper_lip", upper, "retrusive upper lip", "normal upper lip", "protrusive upper lip"),
    RangeRule.for_component("lower_lip", lower, "retrusive lower lip", "normal lower lip", "protrusive lower lip"),
)

soft_tissues = Analysis("softTissues", components, interpret_with(rules), name="Soft tissue analysis")
