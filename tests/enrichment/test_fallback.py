"""Tests for the rule-based fallback enrichment"""

from inspiration_list.enrichment.fallback import (
    DEFAULT_CATEGORY,
    SUGGESTIONS,
    KeywordMatcher,
    generate_fallback_content,
)


class TestKeywordMatcher:
    """Latin keywords match whole words, CJK keywords match inside CJK runs"""

    def test_latin_keyword_is_case_insensitive(self):
        assert KeywordMatcher("My new APP idea").matches("app") is True

    def test_latin_keyword_needs_whole_word(self):
        assert KeywordMatcher("an application for notes").matches("app") is False

    def test_cjk_keyword_inside_run(self):
        assert KeywordMatcher("我想做一个应用程序").matches("应用") is True

    def test_latin_keyword_glued_to_cjk(self):
        assert KeywordMatcher("我想做一个语音记录的APP").matches("app") is True

    def test_matches_any(self):
        matcher = KeywordMatcher("团队效率")
        assert matcher.matches_any(("work", "团队")) is True
        assert matcher.matches_any(("design", "设计")) is False


class TestCategory:

    def test_chinese_app_idea_is_tech(self):
        content = generate_fallback_content("我想做一个语音记录的APP")

        assert content.category == "技术创新"
        assert "应用开发" in content.tags

    def test_first_matching_category_wins(self):
        # "project" is a work keyword, "design" a design keyword; work comes first
        content = generate_fallback_content("design review for the project")

        assert content.category == "工作改进"

    def test_life_category(self):
        assert generate_fallback_content("a better daily routine").category == "生活想法"

    def test_learning_category(self):
        assert generate_fallback_content("每天学习一点新知识").category == "学习成长"

    def test_business_category(self):
        assert generate_fallback_content("开一家创业公司").category == "商业想法"

    def test_default_category(self):
        assert generate_fallback_content("hello there").category == DEFAULT_CATEGORY


class TestTags:

    def test_base_tags_first(self):
        tags = generate_fallback_content("hello there").tags

        assert tags[:2] == ["想法", "灵感"]

    def test_short_idea_tag(self):
        assert "简短想法" in generate_fallback_content("a quick design thought").tags

    def test_chinese_example_tags(self):
        # 11 words: neither short nor detailed
        tags = generate_fallback_content("我想做一个语音记录的APP").tags

        assert tags == ["想法", "灵感", "应用开发"]

    def test_detailed_idea_tag_and_cap(self):
        text = "app design business " + " ".join(f"word{i}" for i in range(60))

        tags = generate_fallback_content(text).tags

        assert tags == ["想法", "灵感", "应用开发", "设计", "商业", "详细想法"]
        assert len(tags) <= 6


class TestSummaryAndDetails:

    def test_summary_truncated_to_80(self):
        text = "x" * 100

        assert generate_fallback_content(text).summary == "x" * 80 + "..."

    def test_short_summary_kept(self):
        assert generate_fallback_content("短想法").summary == "短想法"

    def test_chinese_details_and_suggestions(self):
        content = generate_fallback_content("一个简单的想法")

        assert content.details.startswith("这是一个简洁的想法")
        assert content.suggestions == SUGGESTIONS["zh"][:3]

    def test_english_details_and_suggestions(self):
        content = generate_fallback_content(" ".join(["word"] * 25))

        assert content.details.startswith("This is a detailed idea")
        assert content.suggestions == SUGGESTIONS["en"][:3]


class TestDeterminism:

    def test_same_input_same_output(self):
        text = "I want to build an app that helps my team design products"

        assert generate_fallback_content(text) == generate_fallback_content(text)
