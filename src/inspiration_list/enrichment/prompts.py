"""Prompt and request payload for the enrichment endpoint."""

ENRICHMENT_PROMPT = """请分析以下灵感记录文本，并提供结构化的分析结果。

原始文本：
"{text}"

请按照以下JSON格式返回分析结果：
{{
  "summary": "简洁的摘要（1-2句话）",
  "details": "详细的扩展内容和建议（3-5句话）",
  "suggestions": ["具体建议1", "具体建议2", "具体建议3"],
  "tags": ["相关标签1", "相关标签2", "相关标签3"],
  "category": "主要分类（如：技术创新、生活想法、工作改进、创意设计等）"
}}

请确保返回有效的JSON格式，不要包含其他文字。"""


def build_prompt(text: str) -> str:
    return ENRICHMENT_PROMPT.format(text=text)


def build_request_body(
    prompt: str,
    temperature: float = 0.7,
    top_k: int = 40,
    top_p: float = 0.8,
    max_output_tokens: int = 1024,
) -> dict:
    """Gemini generateContent request body"""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "generationConfig": {
            "temperature": temperature,
            "topK": top_k,
            "topP": top_p,
            "maxOutputTokens": max_output_tokens,
        },
    }
