"""Central configuration for the activity → health simulation."""

from pathlib import Path

# ── Paths ──────────────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parents[2]
FIGURES_DIR = PROJECT_ROOT / "figures"

# ── Reproducibility ───────────────────────────────────────────────────────────
RANDOM_SEED = 42

# ── Synthetic data defaults ────────────────────────────────────────────────────
DEFAULT_N_SAMPLES = 10_000
N_REGIONS = 5

# ── True causal effect (ground truth of the DGP) ───────────────────────────────
TRUE_ACTIVITY_EFFECT = 2.5

# ── Variable names ─────────────────────────────────────────────────────────────
TREATMENT_COL = "ActivitePhysique"
OUTCOME_COL = "ScoreSante"
MEDIATOR_COL = "IMC"
OVERCONTROL_COL = "MotivationSante"

COLUMN_ORDER = [
    "ScoreSante",
    "ActivitePhysique",
    "Sexe",
    "Tabagisme",
    "Age",
    "Education",
    "RevenuFamilial",
    "IMC",
    "MotivationSante",
    "Region",
    "Milieu",
    "EtatSanteChronique",
    "ConsommationAlcool",
    "StressPsychologique",
    "SoutienSocial",
    "QualiteSommeil",
    "OccupationPhysique",
    "AccesSoins",
    "Alimentation",
]

# ── Output types ───────────────────────────────────────────────────────────────
INTEGER_COLS = [
    "ActivitePhysique",
    "Age",
    "MotivationSante",
    "EtatSanteChronique",
    "StressPsychologique",
    "SoutienSocial",
    "QualiteSommeil",
    "OccupationPhysique",
    "AccesSoins",
    "Alimentation",
]
FLOAT_COLS = ["ScoreSante", "RevenuFamilial", "IMC"]

# Closed category sets (Region levels depend on n_regions)
CATEGORIES = {
    "Sexe": ["Homme", "Femme"],
    "Tabagisme": ["Fumeur", "Non-fumeur"],
    "Education": ["Primaire", "Secondaire", "Superieur"],
    "Milieu": ["Urbain", "Rural"],
    "ConsommationAlcool": ["Buveur", "Non-buveur"],
}
ORDERED_CATEGORICALS = {"Education"}

# ── Domains ────────────────────────────────────────────────────────────────────
AGE_RANGE = (18, 80)
SCORE_RANGE = (0, 10)
IMC_RANGE = (16, 45)
HEALTH_RANGE = (0, 100)
MIN_INCOME = 15

# ── Causal structure ───────────────────────────────────────────────────────────
CAUSAL_PARENTS = {
    "Region": [],
    "Milieu": [],
    "Age": [],
    "Sexe": [],
    "Education": ["Age", "Milieu"],
    "RevenuFamilial": ["Education", "Milieu"],
    "Tabagisme": ["Education", "RevenuFamilial", "Age"],
    "ConsommationAlcool": ["Sexe", "Age", "RevenuFamilial"],
    "StressPsychologique": ["Milieu", "RevenuFamilial", "Sexe", "Education"],
    "SoutienSocial": ["Milieu", "Age", "Sexe"],
    "OccupationPhysique": ["Milieu", "Sexe", "Education"],
    "AccesSoins": ["RevenuFamilial", "Milieu", "Region"],
    "Alimentation": ["Education", "RevenuFamilial", "Milieu"],
    "MotivationSante": ["Sexe", "Education", "Tabagisme"],
    "ActivitePhysique": [
        "MotivationSante",
        "Sexe",
        "RevenuFamilial",
        "Education",
        "Milieu",
        "Age",
        "Tabagisme",
        "StressPsychologique",
        "SoutienSocial",
    ],
    "QualiteSommeil": ["Age", "StressPsychologique", "ActivitePhysique"],
    "IMC": [
        "ActivitePhysique",
        "Age",
        "Sexe",
        "Tabagisme",
        "RevenuFamilial",
        "Alimentation",
    ],
    "EtatSanteChronique": ["Age", "Tabagisme", "IMC", "RevenuFamilial"],
    "ScoreSante": [c for c in COLUMN_ORDER if c != "ScoreSante"],
}

# Order in which the generator realises each variable
GENERATION_ORDER = [
    "Region",
    "Milieu",
    "Age",
    "Sexe",
    "Education",
    "RevenuFamilial",
    "Tabagisme",
    "ConsommationAlcool",
    "StressPsychologique",
    "SoutienSocial",
    "OccupationPhysique",
    "AccesSoins",
    "Alimentation",
    "MotivationSante",
    "ActivitePhysique",
    "QualiteSommeil",
    "IMC",
    "EtatSanteChronique",
    "ScoreSante",
]
