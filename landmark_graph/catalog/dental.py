from ..analysis import Analysis, AnalysisComponent
from ..interpret import RangeRule, interpret_with
from .constructions import angle_between_lines
from .landmarks import L1Axis, MP, SN, U1Axis

u1_sn = angle_between_lines(U1Axis, SN, "U1-SN", "Upper incisor inclination", acute=False, supplement=True)
impa = angle_between_lines(L1Axis, MP, "IMPA", "Lower incisor to mandibular plane", acute=False)
interincisal = angle_between_lines(U1Axis, L1Axis, "U1-L1", "Interincisal angle", acute=False)

upper_incisor = AnalysisComponent(u1_sn, norm=103.0, std_dev=6.0)
lower_incisor = AnalysisComponent(impa, norm=90.0, std_dev=5.0)
incisors = AnalysisComponent(interincisal, norm=131.0, std_dev=6.0)

components = (upper_incisor, lower_incisor, incisors)

rules = (
    RangeRule.for_component("upper_incisor", upper_incisor, "retroclined", "normally inclined", "proclined"),
    RangeRule.for_component("lower_incisor", lower_incisor, "retroclined", "normally inclined", "proclined"),
    RangeRule.for_component(
        "incisors",
        incisors,
        "bimaxillary protrusion",
        "normal interincisal angle",
        "bimaxillary retrusion",
    ),
)

dental = Analysis("dental", components, interpret_with(rules), name="Dental analysis")
