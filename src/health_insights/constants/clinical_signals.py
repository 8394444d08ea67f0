# ============================================================================
# src/health_insights/constants/clinical_signals.py
# ============================================================================
"""
Clinical Signal Vocabulary
- Phrase patterns scanned by the local heuristic generator
- Age extraction
"""

import re
from dataclasses import dataclass
from typing import Optional

SIGNAL_PATTERNS = {
    "high_bp": re.compile(r"high blood pressure|150/95|hypertension|elevated blood pressure", re.I),
    "cholesterol": re.compile(r"cholesterol|lipid|ldl|hdl|elevated cholesterol", re.I),
    "chest_pain": re.compile(r"chest pain|angina|chest discomfort", re.I),
    "shortness_of_breath": re.compile(r"shortness of breath|dyspnea|breathing difficulty", re.I),
    "diabetes": re.compile(r"diabetes|glucose|hba1c|diabetic|blood sugar", re.I),
    "heart_disease": re.compile(r"heart disease|cardiac|myocardial|cardiovascular", re.I),
    "family_history": re.compile(r"family history|hereditary|genetic", re.I),
    "age": re.compile(r"\d+\s*years?\s*old", re.I),
    "smoking": re.compile(r"smoker|non-smoker|tobacco|smoking", re.I),
    "normal_values": re.compile(r"normal|good|within range|stable", re.I),
    "abnormal_values": re.compile(r"abnormal|elevated|high|low|concerning", re.I),
    "exercise": re.compile(r"exercise|physical activity|workout", re.I),
    "medication": re.compile(r"medication|drug|prescription|treatment", re.I),
}

AGE_PATTERN = re.compile(r"(\d+)\s*years?\s*old", re.I)
NON_SMOKER_PHRASE = "non-smoker"


@dataclass(frozen=True)
class ClinicalSignals:
    """Boolean phrase matches over one record description."""
    high_bp: bool = False
    cholesterol: bool = False
    chest_pain: bool = False
    shortness_of_breath: bool = False
    diabetes: bool = False
    heart_disease: bool = False
    family_history: bool = False
    age: bool = False
    smoking: bool = False
    normal_values: bool = False
    abnormal_values: bool = False
    exercise: bool = False
    medication: bool = False
    non_smoker: bool = False
    age_years: Optional[int] = None

    @property
    def hard_signal(self) -> bool:
        """High BP, cholesterol or chest pain."""
        return self.high_bp or self.cholesterol or self.chest_pain

    @property
    def any_condition(self) -> bool:
        return self.hard_signal or self.diabetes


def parse_age(text: str) -> Optional[int]:
    """First integer immediately preceding 'years old', if any."""
    match = AGE_PATTERN.search(text or "")
    if not match:
        return None
    return int(match.group(1))


def detect_signals(text: str) -> ClinicalSignals:
    text = text or ""
    flags = {name: bool(pattern.search(text)) for name, pattern in SIGNAL_PATTERNS.items()}
    return ClinicalSignals(
        **flags,
        non_smoker=NON_SMOKER_PHRASE in text.lower(),
        age_years=parse_age(text),
    )
