# ftskit/messages/tokenize_messages.py

# ✅ Positive
TOKENIZE_SUCCESS = "Text tokenized successfully."
STATEMENT_SUCCESS = "Tokenizer statement rendered successfully."

# ❌ Errors
TOKENIZER_REJECTED = "SQLite rejected the tokenizer request."
INPUT_TOO_LONG = "Input text exceeds the maximum length of {limit} characters."
INPUT_INVALID = "Input text contains characters that cannot be encoded as UTF-8."
