"""
taskspec — parameter substitution for declarative task specifications.

Replaces ``${inputs.params.NAME}`` and ``${SCOPE.resources.BINDING.FIELD}``
placeholders in task steps and volumes, returning an independent copy of
the task.
"""

__version__ = "1.0.0"
