JUNIOR = "junior"
SENIOR = "senior"

GROUP_CHOICES = (
    (JUNIOR, "Junior"),
    (SENIOR, "Senior"),
)
GROUPS = tuple(code for code, _ in GROUP_CHOICES)
GROUP_LABELS = dict(GROUP_CHOICES)

ROUND_CHOICES = (
    (1, "Ronda 1"),
    (2, "Ronda 2"),
)
ROUNDS = (1, 2)
