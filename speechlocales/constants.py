"""Fixed lookup tables used when building the locale tables."""

from types import MappingProxyType

# Adaptation type codes reported by custom speech base models
ADAPTATION_TYPES = MappingProxyType({
    "Acoustic": "Audio + human-labeled transcript",
    "AudioFiles": "Audio",
    "Language": "Plain text",
    "Pronunciation": "Pronunciation",
    "LanguageMarkdown": "Structured text",
    "OutputFormatting": "Output format",
})

PHRASE_LIST_LABEL = "Phrase list"

PHRASE_LIST_LOCALES = frozenset([
    "ar-SA", "de-CH", "de-DE", "en-AU", "en-CA", "en-GB", "en-IE", "en-IN",
    "en-US", "en-ZA", "es-ES", "es-MX", "es-US", "fr-CA", "fr-FR", "hi-IN",
    "id-ID", "it-IT", "ja-JP", "ko-KR", "nl-NL", "pl-PL", "pt-BR", "pt-PT",
    "ru-RU", "sv-SE", "th-TH", "vi-VN", "zh-CN", "zh-HK", "zh-TW",
])

VISEME_LOCALES = frozenset([
    "ar-AE", "ar-BH", "ar-DZ", "ar-EG", "ar-IQ", "ar-JO", "ar-KW", "ar-LB",
    "ar-LY", "ar-MA", "ar-OM", "ar-QA", "ar-SA", "ar-SY", "ar-TN", "ar-YE",
    "bg-BG", "ca-ES", "cs-CZ", "da-DK", "de-AT", "de-CH", "de-DE", "el-GR",
    "en-AU", "en-CA", "en-GB", "en-HK", "en-IE", "en-IN", "en-KE", "en-NG",
    "en-NZ", "en-PH", "en-SG", "en-TZ", "en-US", "en-ZA", "es-AR", "es-BO",
    "es-CL", "es-CO", "es-CR", "es-CU", "es-DO", "es-EC", "es-ES", "es-GQ",
    "es-GT", "es-HN", "es-MX", "es-NI", "es-PA", "es-PE", "es-PR", "es-PY",
    "es-SV", "es-US", "es-UY", "es-VE", "fi-FI", "fr-BE", "fr-CA", "fr-CH",
    "fr-FR", "gu-IN", "he-IL", "hi-IN", "hr-HR", "hu-HU", "id-ID", "it-IT",
    "ja-JP", "ko-KR", "mr-IN", "ms-MY", "nb-NO", "nl-BE", "nl-NL", "pl-PL",
    "pt-BR", "pt-PT", "ro-RO", "ru-RU", "sk-SK", "sl-SI", "sv-SE", "sw-TZ",
    "ta-IN", "ta-LK", "ta-MY", "ta-SG", "te-IN", "th-TH", "tr-TR", "uk-UA",
    "ur-IN", "ur-PK", "vi-VN", "zh-CN", "zh-HK", "zh-TW",
])

CHILD_VOICES = frozenset([
    "de-DE-GiselaNeural", "en-GB-MaisieNeural", "en-US-AnaNeural",
    "es-MX-MarinaNeural", "fr-FR-EloiseNeural", "it-IT-PierinaNeural",
    "pt-BR-LeticiaNeural", "zh-CN-XiaoshuangNeural", "zh-CN-XiaoyouNeural",
])

CHILD_GENDER_SUFFIX = ", Child"

INDIAN_REGION_LOCALES = frozenset(["as-IN", "or-IN", "pa-IN"])

# Chinese dialect accents, kept lower-case in locale codes
CHINESE_ACCENTS = frozenset([
    "shandong", "liaoning", "sichuan", "henan", "shaanxi",
])

# Checked in this order; the first key contained in the locale wins
LANGUAGE_OVERRIDES = (
    ("ca-ES", "Catalan"),
    ("tr-TR", "Turkish (Türkiye)"),
    ("sw-KE", "Kiswahili (Kenya)"),
    ("sw-TZ", "Kiswahili (Tanzania)"),
    ("zu-ZA", "isiZulu (South Africa)"),
)

# Footnote markers attached to text to speech voices
FOOTNOTE_PREVIEW = 1
FOOTNOTE_PREVIEW_INDIAN_REGION = 2
FOOTNOTE_NO_VISEME = 3
FOOTNOTE_MULTILINGUAL = 4

NOT_SUPPORTED = "Not supported"
CELL_LINE_BREAK = "<br/>"
CUSTOM_SPEECH_SEPARATOR = "<br/><br/>"

OUTPUT_FILES = MappingProxyType({
    "stt": "stt.md",
    "language-identification": "language-identification.md",
    "tts": "tts.md",
    "voice-styles-and-roles": "voice-styles-and-roles.md",
})
