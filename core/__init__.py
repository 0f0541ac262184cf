"""
core
----

Incremental score engine components:

- HardSoftScore:  
  Immutable (init, hard, soft) score with lexicographic ordering.

- PlanningVariable & PlanningSolution:  
  Mark the mutable field of an entity and hold the entity collection and score.

- IncrementalScoreCalculator & ContributionScoreCalculator:  
  Keep running aggregates up to date from before/after move notifications.

- ScoreDirector:  
  Bracket mutations with the notifications and verify against a full recalculation.
"""
