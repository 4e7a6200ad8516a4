from .tsp import TSPInstance, read_coordinates
from .distance import DistanceTable
from .sampler import PermutationSampler, randperm, is_valid_cycle
from .evaluator import path_length, edge_lengths
from .simulation import (DisplayMode, SimulationConfig, MonteCarloSimulation, SimulationResult,
                         TrialResult, BestPath, MAX_TRIALS, simulate)
from .experiments import run_repeated_trials, run_trial_sweep, run_parallel
