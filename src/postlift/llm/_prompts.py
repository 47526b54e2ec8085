"""Prompt templates sent with each request."""

IMAGE_EXTRACTION_PROMPT = (
    "Extract all text from this image. Return only the extracted text without any "
    "additional commentary or formatting. If there is no text, return "
    "'No text found in image'."
)

PDF_EXTRACTION_PROMPT = (
    "Extract all text from this PDF document. Return only the extracted text without "
    "any additional commentary. Preserve paragraph breaks where appropriate."
)

ANALYSIS_PROMPT_TEMPLATE = """\
Analyze the following text as if it were a social media post and provide specific, \
actionable suggestions to improve engagement. Focus on:

1. Emoji recommendations (suggest specific emojis and where to place them)
2. Hashtag suggestions (provide 5-8 relevant hashtags)
3. Sentence structure improvements (suggest rewrites for better flow)
4. Call-to-action enhancements (suggest engaging CTAs)
5. Tone and voice optimization

Text to analyze:
{text}

Please format your response with clear sections and bullet points for easy reading."""
