"""Registry of built-in macros (special forms) for the Loom evaluator.

Each entry is a Macro value: it receives its operands unevaluated and is
installed into a fresh Environment by loom.builtin.macro_builtin.
"""

from loom.types.callable import Macro
from loom.evaluation.special_forms.if_form import if_form
from loom.evaluation.special_forms.set_form import set_form
from loom.evaluation.special_forms.do_form import do_form
from loom.evaluation.special_forms.quote_forms import quote_form
from loom.evaluation.special_forms.table_forms import table_form, get_form
from loom.evaluation.special_forms.match_form import match_form
from loom.evaluation.special_forms.random_form import random_form
from loom.evaluation.special_forms.run_form import run_form

SPECIAL_FORMS = {
    "if": Macro("if", if_form, min_args=1, max_args=3),
    "let": Macro("let", set_form, min_args=2, max_args=2),
    "set": Macro("set", set_form, min_args=2, max_args=2),
    "do": Macro("do", do_form),
    "table": Macro("table", table_form, accepts_keywords=True),
    "get": Macro("get", get_form, min_args=1),
    "quote": Macro("quote", quote_form),
    "match": Macro("match", match_form, min_args=1),
    "random": Macro("random", random_form, min_args=1, max_args=1),
    "run": Macro("run", run_form, min_args=1, max_args=1),
}
