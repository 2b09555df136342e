"""Core PSC building blocks: models, errors and the text parser."""
