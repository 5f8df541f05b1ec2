# Pico: a small Lisp interpreter core.
#
# Layout:
# - pico.types:       runtime values (the seven variants) and the symbol table
# - pico.reader:      text -> Value graph
# - pico.evaluation:  evaluator, application engine and special forms
# - pico.builtin:     native function registry and the builtin library
# - pico.interpreter: the Interpreter facade tying read/eval/print together
#
# Runtime state lives on a Context object (pico.runtime_context), never at
# module level, so independent interpreters can coexist.

__version__ = "0.1.0"
