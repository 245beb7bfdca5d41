from .store import ClinicStore
from .summary_cache import InMemorySummaryCache

__all__ = ["ClinicStore", "InMemorySummaryCache"]
