"""Rule-based enrichment used when the AI endpoint is unavailable.

The output is a pure function of the input text: same text, same
category, tags, summary, details and suggestions.
"""

from inspiration_list.models import EnhancedContent
from inspiration_list.utils.text import CJK_PATTERN, count_words, detect_language, tokenize, truncate

DEFAULT_CATEGORY = "一般想法"

# Checked in order; the first category with a matching keyword wins
CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "技术创新": ("技术", "软件", "应用", "开发", "编程", "代码", "app", "tech", "code", "software"),
    "工作改进": ("工作", "项目", "团队", "管理", "效率", "work", "project", "team", "efficiency"),
    "生活想法": ("生活", "日常", "健康", "家庭", "life", "daily", "health", "family"),
    "创意设计": ("设计", "创意", "艺术", "美术", "design", "creative", "art"),
    "学习成长": ("学习", "教育", "知识", "技能", "learn", "education", "knowledge", "skill"),
    "商业想法": ("商业", "创业", "产品", "市场", "business", "startup", "product", "market"),
}

BASE_TAGS = ("想法", "灵感")

# (tag, keywords) pairs added after the base tags, in order
KEYWORD_TAGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("应用开发", ("app", "应用")),
    ("设计", ("design", "设计")),
    ("商业", ("business", "商业")),
)

SHORT_IDEA_TAG = "简短想法"
DETAILED_IDEA_TAG = "详细想法"
SHORT_IDEA_MAX_WORDS = 10
DETAILED_IDEA_MIN_WORDS = 50
DETAILED_DETAILS_MIN_WORDS = 20
MAX_TAGS = 6
SUMMARY_MAX_CHARS = 80

SUGGESTIONS = {
    "zh": [
        "深入研究相关领域",
        "寻找类似的成功案例",
        "制定详细的行动计划",
        "与他人讨论获得反馈",
    ],
    "en": [
        "Research the relevant field in depth",
        "Look for similar success stories",
        "Create a detailed action plan",
        "Discuss with others for feedback",
    ],
}


class KeywordMatcher:
    """Matches keywords against a tokenized text.

    Latin keywords must equal a whole word; CJK keywords may appear
    anywhere inside a run of CJK characters.
    """

    def __init__(self, text: str):
        tokens = tokenize(text)
        self._words = {t for t in tokens if not CJK_PATTERN.match(t)}
        self._cjk_runs = [t for t in tokens if CJK_PATTERN.match(t)]

    def matches(self, keyword: str) -> bool:
        if CJK_PATTERN.match(keyword):
            return any(keyword in run for run in self._cjk_runs)
        return keyword in self._words

    def matches_any(self, keywords) -> bool:
        return any(self.matches(k) for k in keywords)


def classify(matcher: KeywordMatcher) -> str:
    for category, keywords in CATEGORY_KEYWORDS.items():
        if matcher.matches_any(keywords):
            return category
    return DEFAULT_CATEGORY


def build_tags(matcher: KeywordMatcher, word_count: int) -> list[str]:
    tags = list(BASE_TAGS)
    for tag, keywords in KEYWORD_TAGS:
        if matcher.matches_any(keywords):
            tags.append(tag)
    if word_count < SHORT_IDEA_MAX_WORDS:
        tags.append(SHORT_IDEA_TAG)
    if word_count > DETAILED_IDEA_MIN_WORDS:
        tags.append(DETAILED_IDEA_TAG)
    return tags[:MAX_TAGS]


def build_details(language: str, word_count: int) -> str:
    detailed = word_count > DETAILED_DETAILS_MIN_WORDS
    if language == "zh":
        return (
            f"这是一个{'详细的' if detailed else '简洁的'}想法。"
            "建议进一步思考具体的实施步骤，考虑可能遇到的挑战和所需的资源。"
            "可以尝试将想法分解为更小的可执行任务。"
        )
    return (
        f"This is a {'detailed' if detailed else 'concise'} idea. "
        "Consider thinking further about specific implementation steps, "
        "potential challenges, and required resources. "
        "Try breaking the idea down into smaller, actionable tasks."
    )


def generate_fallback_content(text: str) -> EnhancedContent:
    """Derive enhanced content from the text alone."""
    language = detect_language(text)
    word_count = count_words(text)
    matcher = KeywordMatcher(text)

    return EnhancedContent(
        summary=truncate(text, SUMMARY_MAX_CHARS),
        details=build_details(language, word_count),
        suggestions=SUGGESTIONS[language][:3],
        tags=build_tags(matcher, word_count),
        category=classify(matcher),
    )
