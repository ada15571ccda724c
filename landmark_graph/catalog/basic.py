from ..analysis import Analysis, AnalysisComponent
from ..interpret import RangeRule, interpret_with
from .constructions import angle_between_lines, angle_between_points, difference
from .landmarks import A, B, FH, MP, N, S, SN

SNA = angle_between_points(S, N, A, "SNA", "Anteroposterior position of the maxilla")
SNB = angle_between_points(S, N, B, "SNB", "Anteroposterior position of the mandible")
ANB = difference(SNA, SNB, "ANB", "Skeletal sagittal relationship")
FMPA = angle_between_lines(FH, MP, "FMPA", "Frankfort mandibular plane angle")
SN_MP = angle_between_lines(SN, MP, "SN^MP", "Mandibular plane to anterior cranial base")

sna = AnalysisComponent(SNA, norm=82.0, std_dev=3.5)
snb = AnalysisComponent(SNB, norm=80.0, std_dev=3.0)
anb = AnalysisComponent(ANB, norm=2.0, std_dev=2.0)
fmpa = AnalysisComponent(FMPA, norm=25.0, std_dev=5.0)
sn_mp = AnalysisComponent(SN_MP, norm=32.0, std_dev=5.0)

components = (sna, snb, anb, fmpa, sn_mp)

rules = (
    RangeRule.for_component("maxilla", sna, "retrognathic maxilla", "normal maxilla", "prognathic maxilla"),
    RangeRule.for_component("mandible", snb, "retrognathic mandible", "normal mandible", "prognathic mandible"),
    RangeRule.for_component(
        "skeletal_pattern",
        anb,
        "skeletal class III",
        "skeletal class I",
        "skeletal class II",
        relevant_components=("SNA", "SNB", "ANB"),
    ),
    RangeRule.for_component("growth_pattern", fmpa, "hypodivergent", "normodivergent", "hyperdivergent"),
    RangeRule.for_component("growth_pattern", sn_mp, "hypodivergent", "normodivergent", "hyperdivergent"),
)

basic = Analysis("basic", components, interpret_with(rules), name="Basic analysis")
