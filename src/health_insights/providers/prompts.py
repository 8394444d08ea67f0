# ============================================================================
# src/health_insights/providers/prompts.py
# ============================================================================
"""
Prompt templates for record analysis.

- Document prompt: record has an image/PDF attachment; framed by record type,
  optionally carrying an OCR snippet
- Record prompt: no attachment, metadata and description only
- Alternate prompt: short structured request for the non-default providers
"""

from typing import Optional

from ..constants.record_types import RecordType
from ..core.models import RecordDescriptor

SYSTEM_PROMPT = (
    "You are a medical AI assistant that analyzes health records and provides "
    "comprehensive insights. Always respond with valid JSON format."
)

ALTERNATE_SYSTEM_PROMPT = (
    "You are a medical AI assistant that analyzes health records and provides "
    "structured medical insights."
)

_TYPE_FRAMING = {
    RecordType.PRESCRIPTION: """
This is a PRESCRIPTION document. Analyze as if examining:
- Medication names, dosages, and instructions
- Prescriber information and signatures
- Patient information and dates
- Drug interactions and warnings
- Compliance instructions
""",
    RecordType.LAB_RESULTS: """
This is a LABORATORY RESULTS document. Analyze as if examining:
- Blood test values (CBC, chemistry panel, lipid profile)
- Reference ranges and abnormal values
- Test dates and collection times
- Laboratory name and location
- Critical values and flags
""",
    RecordType.IMAGING: """
This is an IMAGING STUDY document. Analyze as if examining:
- Imaging modality (X-ray, CT, MRI, Ultrasound)
- Anatomical findings and measurements
- Radiologist impressions and recommendations
- Image quality and technical factors
- Comparison with prior studies
""",
}

_DOCUMENT_JSON_SHAPE = """{
  "summary": "Comprehensive analysis of the medical document content, describing what specific medical information is present and its clinical significance",
  "keyFindings": ["Specific medical finding 1", "Specific medical finding 2", "Specific medical finding 3"],
  "riskWarnings": ["Specific clinical risk 1", "Specific clinical risk 2"],
  "recommendations": ["Actionable recommendation 1", "Actionable recommendation 2", "Actionable recommendation 3"],
  "confidence": 0.88,
  "analysisType": "Medical Document Analysis"
}"""

_RECORD_JSON_SHAPE = """{
  "summary": "A 2-3 sentence overview of what this health record represents and its medical context",
  "keyFindings": ["Specific observation 1", "Specific observation 2", "Specific observation 3"],
  "riskWarnings": ["Any potential concern 1", "Any potential concern 2"],
  "recommendations": ["Specific action 1", "Specific action 2", "Specific action 3"],
  "confidence": 0.85,
  "analysisType": "Comprehensive Health Analysis"
}"""


def type_framing(record: RecordDescriptor) -> str:
    """Record-type specific guidance; empty for generic records."""
    return _TYPE_FRAMING.get(record.normalized_type, "")


def build_document_prompt(record: RecordDescriptor, ocr_snippet: Optional[str] = None) -> str:
    extension = (record.file_extension or "").upper()
    ocr_block = f'\nExtracted Text Snippet (OCR):\n"""\n{ocr_snippet}\n"""\n' if ocr_snippet else ""

    return f"""You are a medical AI assistant with expertise in analyzing medical documents and images. You are examining a medical document that has been uploaded.

Document Information:
- Title: {record.title}
- Document Type: {record.record_type}
- File Format: {extension}
- File Name: {record.file_name}
- Date: {record.service_date}
- Additional Notes: {record.description or 'No additional description provided'}
{ocr_block}
CRITICAL INSTRUCTIONS:
1. Analyze this as if you are examining the actual medical document content
2. Each section must contain DIFFERENT, specific medical information
3. Base your analysis on the document type and typical medical content
4. Provide realistic medical findings appropriate for this type of document
5. Be specific and clinically relevant
6. Do NOT repeat sentences across sections. Keep bullets concise (1 sentence each).
{type_framing(record)}
Provide analysis in this JSON format:

{_DOCUMENT_JSON_SHAPE}

Respond ONLY with valid JSON."""


def build_record_prompt(record: RecordDescriptor) -> str:
    return f"""You are a medical AI assistant. Analyze this health record and provide a comprehensive medical analysis.

Health Record Details:
- Title: {record.title}
- Type: {record.record_type}
- Description: {record.description or 'No detailed description provided'}
- Service Date: {record.service_date}

IMPORTANT INSTRUCTIONS:
1. Even if description is empty, provide meaningful analysis based on the record type and title
2. Each section should have DIFFERENT content - do not repeat the same text
3. Be specific and actionable in your recommendations
4. If data is limited, provide general medical guidance based on the record type

Respond with valid JSON only:

{_RECORD_JSON_SHAPE}

Respond ONLY with the JSON object, no other text."""


def build_alternate_prompt(record: RecordDescriptor, as_json: bool = True) -> str:
    """Short prompt for the alternate and secondary providers."""
    prompt = f"""
Analyze this health record and provide medical insights:

Title: {record.title}
Type: {record.record_type}
Date: {record.service_date}
Description: {record.description}
"""
    if not as_json:
        return prompt + """
Please provide:
1. A medical summary
2. Key findings
3. Risk warnings
4. Recommendations
5. Confidence level (0-1)
"""
    return prompt + """
Please provide a structured analysis with:
1. Summary: Brief medical summary
2. Key Findings: List of important findings
3. Risk Warnings: Any concerning issues
4. Recommendations: Specific medical recommendations
5. Confidence: Rate confidence 0-1

Format as JSON:
{
  "summary": "...",
  "keyFindings": ["...", "..."],
  "riskWarnings": ["...", "..."],
  "recommendations": ["...", "..."],
  "confidence": 0.85
}
"""
