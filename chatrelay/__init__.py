# chat-relay package

# Proxies chat turns to an upstream LLM and relays the reply back.
