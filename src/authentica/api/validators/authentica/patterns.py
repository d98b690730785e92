"""Padrões de formato aceitos pela API Authentica."""

from __future__ import annotations

import re

# "+" seguido de 7 a 15 dígitos ASCII, sem zero inicial
E164_PATTERN = re.compile(r"^\+[1-9][0-9]{6,14}$")

# \s em modo Unicode: NBSP e afins também separam
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
