# logic/__init__.py
# This file is part of Tabula - A Propositional Truth Table Generator
#
# Evaluation, variable collection and truth table enumeration

from .collector import collect_variables, unique_variables
from .evaluator import Evaluator, evaluate
from .exceptions import EvaluationError, TooManyVariables, UnboundVariable
from .runner import (
    FormulaFileError,
    FormulaRunner,
    RunnerConfig,
    RunSummary,
    read_formula_file,
)
from .truth_table import (
    DEFAULT_MAX_VARIABLES,
    TruthTable,
    TruthTableRow,
    build_truth_table,
    enumerate_assignments,
    evaluate_once,
)

__all__ = [
    "collect_variables",
    "unique_variables",
    "Evaluator",
    "evaluate",
    "EvaluationError",
    "TooManyVariables",
    "UnboundVariable",
    "FormulaFileError",
    "FormulaRunner",
    "RunnerConfig",
    "RunSummary",
    "read_formula_file",
    "DEFAULT_MAX_VARIABLES",
    "TruthTable",
    "TruthTableRow",
    "build_truth_table",
    "enumerate_assignments",
    "evaluate_once",
]
