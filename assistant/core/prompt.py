SYSTEM_PROMPT = """You are a highly intelligent Daily Task Assistant.
You help the user manage their day, answer questions, summarize texts, and analyze files.

Traits:
- Professional yet friendly.
- Concise and action-oriented.
- If a file context is provided, prioritize answering based on that file.
- You can help draft emails, create study plans, and break down goals.
"""

CONTEXT_PROMPT = "[CONTEXT FROM UPLOADED FILES]:\n{context}\n\n[USER QUESTION]:\n{question}"

FILE_CONTEXT = "Active File Content ({name}):\n{content}..."

SUMMARY_PROMPT = "Summarize the following text concisely in bullet points:\n\n{text}"

PLAN_PROMPT = (
    'Create a step-by-step actionable plan (To-Do List) for the following goal: "{goal}".\n'
    "Format the output as a clean Markdown list. Do not add conversational filler."
)

NOTE_ENTRY = "Title: {title}\nContent: {content}"
NOTE_SEPARATOR = "\n\n---\n\n"

CHAT_EMPTY = "I couldn't generate a response."
CHAT_FAILED = (
    "I'm sorry, I encountered an error communicating with the AI service. "
    "Please check your connection or API key."
)
SUMMARY_EMPTY = "Could not generate summary."
SUMMARY_FAILED = "Error generating summary."
PLAN_EMPTY = "Could not generate plan."
PLAN_FAILED = "Error generating plan."
