"""
Term related, process-internal signals.
"""
from django.dispatch import Signal


# TERM_CREATED and TERM_EDITED are sent AFTER a Term has been saved through the
# term editing UI. ``data`` is whatever the editor submitted (usually the
# request's POST QueryDict), so that other apps can persist their own extra
# fields for the term.
#
# These are only sent by the editing UI, never by Term.save(). Code that
# creates terms through api.create_term() is expected to write any extra data
# itself.
#
# providing_args=[
#     'term',  # instance of the saved Term
#     'data',  # submitted form data
# ]
TERM_CREATED = Signal()
TERM_EDITED = Signal()
