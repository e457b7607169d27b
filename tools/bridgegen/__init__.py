"""
bridgegen: bridge stub generator.

Reads a JSON protocol description and emits matching TypeScript, JavaScript,
Java, Objective-C and C/C++ declarations so every platform binding of the
bridge stays in sync with one source of truth.
"""
