"""Configuration keys and defaults for verbosity control."""

# Configuration keys read from the loader-supplied mapping
MODEL_VERBOSITY_KEY = "model_verbosity"

# Accepted verbosity tokens, canonical lowercase form
VERBOSITY_TOKENS = ("low", "medium", "high")
DEFAULT_VERBOSITY_TOKEN = "medium"

# Responses API request field carrying the verbosity hint
TEXT_FIELD = "text"
VERBOSITY_FIELD = "verbosity"

# Provider prefixes stripped before model family lookup
PROVIDER_PREFIXES = ("openai/",)

# Send the default verbosity explicitly for supported models
MATERIALIZE_DEFAULT_VERBOSITY = True
