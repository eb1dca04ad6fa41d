# Chat model clients. Each exposes generate(messages, params) -> (text, meta).
