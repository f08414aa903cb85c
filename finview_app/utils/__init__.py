"""
Utility functions module.

Calendar helpers shared by the generator and the snapshot stores.

Calendar Semantics:
- A trading day is any weekday; holidays are not excluded
- Windows are inclusive on both ends
- Months are numbered 0 (January) to 11 (December) in event schedules
"""
