"""Prompt templates for the LLM-backed evaluation tiers."""

# ── Layered extraction ────────────────────────────────

LAYERED_EXTRACTION_PROMPT = """{extract_prompt}

Data:
{data}

Extract ONLY the relevant text/value. No explanation."""


# ── Descriptive batch judgment ────────────────────────

AFFIRMATIVE_TOKEN = "YES"
NEGATIVE_TOKEN = "NO"

DESCRIPTIVE_BATCH_PROMPT = """You are evaluating the quality of an API analysis output.

DATA TO EVALUATE:
{data}

QUESTIONS (answer YES or NO for each):
{questions}

RESPOND IN THIS EXACT FORMAT (one answer per line):
1. YES
2. NO
...

ANSWER ONLY YES or NO for each question."""
