from .steps import (
    ManualStep,
    MappableStep,
    ComputableStep,
    Step,
    is_step_manual,
    is_step_mappable,
    is_step_computable,
    are_equal_steps,
    are_equal_symbols,
    get_steps_for_analysis,
    try_map,
    try_calculate,
)
from .analysis import Analysis, AnalysisComponent
from .interpret import CategorizedAnalysisResult, RangeRule, interpret_with
from .registry import AnalysisRegistry, UnknownAnalysisError
from .validate import validate_analysis, validate_registry, ValidationError
from .state import WorkspaceState, Workspace, LandmarkFileError, load_landmarks, dump_landmarks
from .config import EngineConfig, get_engine_config, set_engine_config
from .equivalence import EquivalenceIndex, find_equal_components
from .selection import (
    get_active_analysis,
    get_active_analysis_steps,
    get_manual_steps,
    is_analysis_set,
)
from .resolver import (
    is_step_eligible_for_mapping,
    is_step_eligible_for_computation,
    get_mapped_value,
    get_all_geo_objects,
    get_resolved_geo_objects,
    is_step_mapping_complete,
    get_calculated_value,
    is_step_calculation_complete,
    is_step_complete,
    get_all_calculated_values,
)
from .aggregator import (
    AnalysisSummary,
    StepState,
    can_show_results,
    find_step_by_symbol,
    get_categorized_analysis_results,
    get_expected_next_manual_landmark,
    get_manual_step_state,
    get_pending_steps,
    is_analysis_complete,
    summarize,
)

__all__ = [
    'ManualStep',
    'MappableStep',
    'ComputableStep',
    'Step',
    'is_step_manual',
    'is_step_mappable',
    'is_step_computable',
    'are_equal_steps',
    'are_equal_symbols',
    'get_steps_for_analysis',
    'try_map',
    'try_calculate',
    'Analysis',
    'AnalysisComponent',
    'CategorizedAnalysisResult',
    'RangeRule',
    'interpret_with',
    'AnalysisRegistry',
    'UnknownAnalysisError',
    'validate_analysis',
    'validate_registry',
    'ValidationError',
    'WorkspaceState',
    'Workspace',
    'LandmarkFileError',
    'load_landmarks',
    'dump_landmarks',
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
    'EquivalenceIndex',
    'find_equal_components',
    'get_active_analysis',
    'get_active_analysis_steps',
    'get_manual_steps',
    'is_analysis_set',
    'is_step_eligible_for_mapping',
    'is_step_eligible_for_computation',
    'get_mapped_value',
    'get_all_geo_objects',
    'get_resolved_geo_objects',
    'is_step_mapping_complete',
    'get_calculated_value',
    'is_step_calculation_complete',
    'is_step_complete',
    'get_all_calculated_values',
    'AnalysisSummary',
    'StepState',
    'can_show_results',
    'find_step_by_symbol',
    'get_categorized_analysis_results',
    'get_expected_next_manual_landmark',
    'get_manual_step_state',
    'get_pending_steps',
    'is_analysis_complete',
    'summarize',
]
