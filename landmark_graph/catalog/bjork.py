from ..analysis import Analysis, AnalysisComponent
from ..interpret import RangeRule, interpret_with
from .constructions import angle_between_lines, angle_between_points, distance_between_points, line, ratio, sum_of
from .landmarks import Ar, Go, Me, N, S, SN

saddle_angle = angle_between_points(N, S, Ar, "N-S-Ar", "Saddle angle")
articular_angle = angle_between_points(S, Ar, Go, "S-Ar-Go", "Articular angle")
gonial_angle = angle_between_points(Ar, Go, Me, "Ar-Go-Me", "Gonial angle")
polygon_sum = sum_of(saddle_angle, articular_angle, gonial_angle, symbol="BJORK_SUM", description="Sum of posterior angles")

# Bjork draws the mandibular border through gonion and menton; equivalent to MP.
go_me = line(Go, Me, "GoMe", "Mandibular border")
sn_go_me = angle_between_lines(SN, go_me, "SN-GoMe", "Mandibular border to anterior cranial base")

posterior_height = distance_between_points(S, Go, "S-Go", "Posterior face height")
anterior_height = distance_between_points(N, Me, "N-Me", "Anterior face height")
height_ratio = ratio(posterior_height, anterior_height, "S-Go/N-Me", "Facial height ratio")

saddle = AnalysisComponent(saddle_angle, norm=123.0, std_dev=5.0)
articular = AnalysisComponent(articular_angle, norm=143.0, std_dev=6.0)
gonial = AnalysisComponent(gonial_angle, norm=130.0, std_dev=7.0)
polygon = AnalysisComponent(polygon_sum, norm=396.0, std_dev=6.0)
mandibular_border = AnalysisComponent(sn_go_me, norm=32.0, std_dev=5.0)
facial_height = AnalysisComponent(height_ratio, norm=62.0, std_dev=3.0)

components = (saddle, articular, gonial, polygon, mandibular_border, facial_height)

rules = (
    RangeRule.for_component(
        "growth_direction",
        polygon,
        "counterclockwise growth",
        "neutral growth",
        "clockwise growth",
        relevant_components=("N-S-Ar", "S-Ar-Go", "Ar-Go-Me", "BJORK_SUM"),
    ),
    RangeRule.for_component("gonial_angle", gonial, "closed gonial angle", "normal gonial angle", "open gonial angle"),
    RangeRule.for_component("growth_pattern", mandibular_border, "hypodivergent", "normodivergent", "hyperdivergent"),
    RangeRule.for_component(
        "facial_height",
        facial_height,
        "clockwise rotation",
        "balanced facial heights",
        "counterclockwise rotation",
        relevant_components=("S-Go", "N-Me", "S-Go/N-Me"),
    ),
)

bjork = Analysis("bjork", components, interpret_with(rules), name="Bjork polygon")
