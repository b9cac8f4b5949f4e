from .pipeline import PipelineConfig, PipelineResult, PipelineState, StepRecord
from .pool import PoolInfo
from .swap import SwapParams, SwapResult
