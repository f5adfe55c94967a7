"""Configuration for the A* search engine."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Tunables for ``find_path`` that do not affect its result."""

    # Node expansions between DEBUG progress records; 0 disables them
    progress_log_interval: int = 10000

    def should_log_progress(self, expanded: int) -> bool:
        """Return True when ``expanded`` lands on a progress boundary."""
        if self.progress_log_interval <= 0:
            return False
        return expanded % self.progress_log_interval == 0


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
