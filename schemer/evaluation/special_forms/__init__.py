"""Registry of special forms for the schemer evaluator.

Maps head identifiers to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before ordinary
procedure application, so these names cannot be shadowed by definitions.
"""

from schemer.evaluation.special_forms.define_form import define_form
from schemer.evaluation.special_forms.lambda_form import lambda_form
from schemer.evaluation.special_forms.if_form import if_form
from schemer.evaluation.special_forms.cond_form import cond_form
from schemer.evaluation.special_forms.apply_form import apply_form
from schemer.evaluation.special_forms.map_form import map_form

SPECIAL_FORMS = {
    "define": define_form,
    "lambda": lambda_form,
    "if": if_form,
    "cond": cond_form,
    "apply": apply_form,
    "map": map_form,
}
