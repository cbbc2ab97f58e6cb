PROMPT_SEPARATOR = "\n\n---\n\n"


def merge_prompt_text(current_prompt: str, extracted_text: str) -> str:
    """Append extracted document text to the typed prompt.

    The typed prompt is kept in front; the separator is only inserted when
    both sides have content after trimming.
    """
    prompt = current_prompt.strip()
    extracted = extracted_text.strip()
    if not prompt:
        return extracted
    if not extracted:
        return prompt
    return f"{prompt}{PROMPT_SEPARATOR}{extracted}"
