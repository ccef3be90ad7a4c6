"""Service layer.

Two families with the same behaviour:

  unified: every service holds the one large ``DataStore``
  segmented: each service holds only the ``UserStore``/``TodoStore`` it uses

Services apply one cross-entity rule (a todo needs an existing user) and
otherwise pass calls straight through to the store.
"""
