"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Consecutive absences (most recent first) that move a student to "low frequency".
LOW_FREQUENCY_THRESHOLD = 4

DEFAULT_RANKING_LIMIT = 6
DEFAULT_PODIUM_SIZE = 3

HIGH_FREQUENCY_PERCENTAGE = 80.0
MEDIUM_FREQUENCY_PERCENTAGE = 50.0

UNASSIGNED_CLASS_NAME = "Sem Classe"
TOTAL_ROW_NAME = "Total Geral"

MONTH_ABBREVIATIONS = (
    "Jan", "Fev", "Mar", "Abr", "Mai", "Jun",
    "Jul", "Ago", "Set", "Out", "Nov", "Dez",
)

MONTH_NAMES = (
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
)
