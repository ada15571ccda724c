from ..analysis import Analysis, AnalysisComponent
from ..interpret import RangeRule, interpret_with
from .constructions import angle_between_lines
from .landmarks import FH, FacialPlane, MP, YAxis

# Downs measures the mandibular plane against FH under its own name; the
# step is structurally identical to FMPA in the basic analysis.
facial_angle = angle_between_lines(FH, FacialPlane, "FH^N-Pog", "Facial angle")
y_axis = angle_between_lines(FH, YAxis, "FH^S-Gn", "Y axis (growth axis)")
mandibular_plane = angle_between_lines(FH, MP, "MP-FH", "Mandibular plane angle")

facial = AnalysisComponent(facial_angle, norm=87.8, std_dev=3.6)
growth_axis = AnalysisComponent(y_axis, norm=59.4, std_dev=3.8)
mp_fh = AnalysisComponent(mandibular_plane, norm=21.9, std_dev=3.2)

components = (facial, growth_axis, mp_fh)

rules = (
    RangeRule.for_component("chin", facial, "retrusive chin", "normal chin", "protrusive chin"),
    RangeRule.for_component(
        "growth_direction",
        growth_axis,
        "horizontal growth",
        "balanced growth",
        "vertical growth",
    ),
    RangeRule.for_component("growth_pattern", mp_fh, "hypodivergent", "normodivergent", "hyperdivergent"),
)

downs = Analysis("downs", components, interpret_with(rules), name="Downs analysis")
