"""Constants and configuration values for HypeLens."""

# Scoring Constants
class ScoringConstants:
    """Constants for sentiment and hype scoring."""

    BASE_SENTIMENT_SCORE = 50  # neutral starting point
    POSITIVE_CUE_WEIGHT = 8  # added per positive phrase present
    NEGATIVE_CUE_WEIGHT = 12  # subtracted per negative phrase present
    MIN_SCORE = 0
    MAX_SCORE = 100

    # Hype tiers (strictly greater than)
    HIGH_HYPE_ABOVE = 4
    MEDIUM_HYPE_ABOVE = 1

    # Momentum cascade thresholds
    STRONG_MIN_HYPE = 5
    STRONG_MAX_INFO = 1
    MODERATE_MIN_HYPE = 3


# Message templates shown in reports
class MessageConstants:
    """Fixed narrative strings and templates."""

    SENTIMENT_NOTES = (
        "Detected {positive} positive cues and {negative} cautionary cues. "
        "Hype terms found: {hype}."
    )
    MOMENTUM_CONTEXT = (
        "Momentum conditions appear {tier}. This is contextual only and not predictive."
    )

    # Bonding curve explanations
    BONDING_DEFAULT = (
        "No clear bonding-curve cues were found; defaulting to mid-stage educational context."
    )
    BONDING_EARLY = (
        "Early stage cues suggest high volatility and small liquidity pools historically."
    )
    BONDING_LATE = (
        "Late-stage cues historically correlate with higher entry risk; this is not predictive."
    )
    BONDING_MID = (
        "Mid-curve cues often indicate stabilizing or building interest; not a forecast."
    )

    # Risk signals
    RISK_CUE = 'Risk cue detected: "{phrase}" suggests promotional or speculative language.'
    RISK_NO_UTILITY = (
        "No clear utility or product description detected; consider verifying real-world purpose."
    )
    RISK_ANONYMOUS_TEAM = "Anonymous team mentioned; assess accountability and transparency."
    RISK_PLACEHOLDER = "No explicit risk phrases spotted, but always research independently."

    # Pattern similarity
    PATTERN_MEME = (
        "Language resembles early high-hype meme-token patterns. This is NOT predictive of performance."
    )
    PATTERN_UTILITY = (
        "Messaging hints at utility-focused tokens with quieter tone. This is contextual only."
    )
    PATTERN_COMMUNITY = (
        "Description aligns with community-driven hype narratives; educational context only, not a forecast."
    )

    # Shown after every narrative field on display
    DISCLAIMER = (
        "This analysis is educational only and NOT financial advice, predictions, "
        "or investment recommendations."
    )


# Fallback report and status messages
class ErrorConstants:
    """Placeholder values and user-facing status messages."""

    FALLBACK_NOTES = "No analysis could be completed."
    FALLBACK_MOMENTUM = "Unavailable due to an error."
    FALLBACK_BONDING = "No stage estimated."
    FALLBACK_RISK = "Unable to analyze risk signals."
    FALLBACK_PATTERN = "No pattern similarity determined."
    PLACEHOLDER_FIELD = "-"

    STATUS_NO_INPUT = "Please upload an image or paste some text first."
    STATUS_NO_TEXT = "No text available to analyze."
    STATUS_OCR_FAILED = "Could not read text from that image, analyzing pasted text if available."
    STATUS_ANALYSIS_FAILED = "Something went wrong during analysis. Please try again."
    STATUS_COMPLETE = "Analysis complete."
    STATUS_READY = "Ready for analysis. Provide text or upload an image."


# Demo and guidance content
class DemoConstants:
    """Built-in demo input and research checklist."""

    DEMO_TEXT = (
        "Community is hyped about this new meme token launching on a bonding curve. "
        "Early holders expect strong energy, 500 holders milestone soon. "
        "Team is anonymous but says liquidity will be locked. "
        "Claims of 1000x are floating around; utility not yet clear."
    )

    RESEARCH_QUESTIONS = [
        "Is liquidity locked?",
        "Is the team verifiable?",
        "Is there real utility or product?",
        "How concentrated are top holders?",
        "Are contracts verified and audited?",
    ]


# OCR Constants
class OCRConstants:
    """Constants for the OCR collaborator."""

    OCR_PROMPT = (
        "Transcribe all readable text in this image exactly as written. "
        "Return only the text, with no commentary."
    )
    OCR_MAX_TOKENS = 1500
    OCR_TEMPERATURE = 0.0
    DEFAULT_MIME_TYPE = "image/png"


# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    CONFIG_DIR = "config"
    KEYWORD_CONFIG_FILE = "keywords.yaml"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    EXPORT_VERSION = "1.0.0"
