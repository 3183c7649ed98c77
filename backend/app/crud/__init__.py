"""
Data access layer.

One plain function per query or mutation, each taking an explicit session.
Nothing here commits: callers group writes in ``app.db.session.unit_of_work``.
"""
