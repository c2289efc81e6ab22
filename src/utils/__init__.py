from .config import *
from .dag import CausalDAG
from .summary import summarize_data
from .visualization import (
    plot_activity_health,
    plot_confounder_balance,
    treatment_confounders,
)
