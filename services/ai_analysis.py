"""Generative-AI assessment of citizen violation reports.

The analyzer never raises: every outcome is an ``Analysis`` carrying
non-empty text, either a real assessment or one of the fixed fallbacks.
"""
import logging

from flask import current_app
from google import genai

logger = logging.getLogger(__name__)

ANALYZER_KEY = "cpa_analyzer"

FALLBACK_EMPTY = "تعذر تحليل البيانات حالياً."
FALLBACK_ERROR = "حدث خطأ أثناء الاتصال بالمساعد الذكي."

PROMPT_TEMPLATE = """
You are an AI assistant for the Consumer Protection Association in Taiz, Yemen.
Analyze the following violation report:

Product: {product_name}
Official Price: {official_price} YR
Reported Price: {reported_price} YR
User Description: {description}

Please provide a brief assessment (max 50 words) in Arabic.
1. Calculate the percentage increase if applicable.
2. Classify severity (Low, Medium, High).
3. Recommend an immediate action for the admin.

Format the output as plain text.
"""


class Analysis:
    OK = "ok"
    FALLBACK = "fallback"

    def __init__(self, kind, text):
        self.kind = kind
        self.text = text

    @classmethod
    def ok(cls, text):
        return cls(cls.OK, text)

    @classmethod
    def fallback(cls, text):
        return cls(cls.FALLBACK, text)

    @property
    def is_fallback(self):
        return self.kind == self.FALLBACK

    def __repr__(self):
        return f"Analysis({self.kind!r}, {self.text!r})"


def _format_price(value):
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_prompt(product_name, reported_price, official_price, description):
    return PROMPT_TEMPLATE.format(
        product_name=product_name,
        official_price=_format_price(official_price),
        reported_price=_format_price(reported_price),
        description=description,
    )


class ViolationAnalyzer:
    def __init__(self, api_key=None, model="gemini-2.5-flash", client=None):
        self.model = model
        self._client = client
        if self._client is None and api_key:
            self._client = genai.Client(api_key=api_key)

    @property
    def is_configured(self):
        return self._client is not None

    def analyze(self, product_name, reported_price, official_price, description):
        if self._client is None:
            logger.warning("AI analysis skipped: no API key configured")
            return Analysis.fallback(FALLBACK_ERROR)

        prompt = build_prompt(product_name, reported_price, official_price, description)
        try:
            response = self._client.models.generate_content(model=self.model, contents=prompt)
            text = (response.text or "").strip()
        except Exception:
            logger.exception("AI analysis failed for product %s", product_name)
            return Analysis.fallback(FALLBACK_ERROR)

        if not text:
            logger.warning("AI analysis returned no text for product %s", product_name)
            return Analysis.fallback(FALLBACK_EMPTY)
        return Analysis.ok(text)


def get_analyzer():
    return current_app.extensions[ANALYZER_KEY]


def init_app(app):
    app.extensions[ANALYZER_KEY] = ViolationAnalyzer(
        api_key=app.config.get("GEMINI_API_KEY"),
        model=app.config["GEMINI_MODEL"],
    )
