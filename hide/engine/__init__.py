# hide/engine/__init__.py

"""Engine package providing the key store and the redaction tree walk.

The walker only depends on the abstract KeysStorage capability, so any
storage backend with membership testing can drive it.
"""
