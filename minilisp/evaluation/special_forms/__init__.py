"""Registry of special forms for the MiniLisp evaluator.

Maps head symbol names to handlers that control whether and how their
operands are evaluated. The evaluator consults this table before ordinary
application. Only `quote` exists for context-free evaluation.
"""

from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "defun": defun_form,
}

PURE_SPECIAL_FORMS = {
    "quote": quote_form,
}
