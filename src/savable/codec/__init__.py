"""Document codec: introspection-driven encoder and decoder.

Document layout (two-space indent unit):

    app.models.Person:
      id: 1
      firstName: Ann
      address:
        street: Main
        city: X

Line 0 names the type. The ``id`` line is present only for SavableObject
subclasses. A field whose declared type has no scalar converter is written
as ``name:`` followed by its own fields one level deeper.
"""
