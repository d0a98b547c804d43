"""
Filtre de noms de capteurs

Décide si les relevés d'un capteur doivent être rapportés, à partir
d'une liste de motifs utilisée soit comme liste d'exclusion, soit comme
liste d'inclusion.
"""

import re
from typing import Iterable, List, Optional, Pattern

from .exceptions import FilterConfigError


class Filter:
    """
    Filtre de noms basé sur une liste d'expressions régulières

    Si `is_list_ignored` est vrai, la liste est une liste d'exclusion :
    un nom est conservé s'il ne correspond à aucun motif. Sinon, un nom
    est conservé s'il correspond à au moins un motif.
    """

    def __init__(self, is_list_ignored: bool, patterns: List[Pattern]):
        self.is_list_ignored = is_list_ignored
        self.patterns = list(patterns)

    @classmethod
    def from_entries(cls, entries: Iterable[str], is_list_ignored: bool = True,
                     regex: bool = False, case_sensitive: bool = False,
                     whole_word: bool = False) -> 'Filter':
        """
        Construit un filtre à partir d'entrées textuelles

        Args:
            entries: Motifs bruts (texte littéral ou regex)
            is_list_ignored: Liste d'exclusion (True) ou d'inclusion (False)
            regex: Les entrées sont des expressions régulières
            case_sensitive: Comparaison sensible à la casse
            whole_word: Le motif doit couvrir le nom entier

        Returns:
            Filter: Filtre compilé

        Raises:
            FilterConfigError: Si une expression régulière est invalide
        """
        flags = 0 if case_sensitive else re.IGNORECASE
        patterns = []

        for entry in entries:
            entry = entry.strip()
            if not entry:
                continue

            source = entry if regex else re.escape(entry)
            if whole_word:
                source = f"^(?:{source})$"

            try:
                patterns.append(re.compile(source, flags))
            except re.error as e:
                raise FilterConfigError(f"Motif de filtre invalide '{entry}': {e}") from e

        return cls(is_list_ignored, patterns)

    def should_keep(self, name: str) -> bool:
        matched = any(pattern.search(name) for pattern in self.patterns)
        if self.is_list_ignored:
            return not matched
        return matched

    @staticmethod
    def optional_should_keep(temp_filter: Optional['Filter'], name: str) -> bool:
        """Conserve tout nom quand aucun filtre n'est fourni"""
        if temp_filter is None:
            return True
        return temp_filter.should_keep(name)

    def __repr__(self) -> str:
        return (f"Filter(is_list_ignored={self.is_list_ignored}, "
                f"patterns={[p.pattern for p in self.patterns]})")
