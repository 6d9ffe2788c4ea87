"""Member hierarchy levels, lowest rank first."""

from __future__ import annotations

from enum import Enum


class HierarchyLevel(str, Enum):
    CAMISETA = "XI: Camiseta"
    PP = "X: PP"
    MEIO_COLETE = "IX: Meio Colete"
    FULL = "VIII: Full"
    DIRETOR = "VI: Diretor"
    SUB_DIRETOR = "VI: Sub-Diretor"
    SOCIAL = "VI: Social"
    ADM = "VI: ADM"
    SARGENTO_DE_ARMAS = "VI: Sargento de Armas"


__all__ = ["HierarchyLevel"]
