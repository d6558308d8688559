"""Reference specifications shipped with the package."""

# Binary words; q1q2 is an accepting trap once "1" is followed by "0".
SAMPLE_SPEC = """
alphabet={0,1}
state={q0, q1, q1q2, q2}
start_state=q0
F={q1q2, q2}
(q0, 1)->q1
(q0, 0)->q0
(q1, 1)->q1
(q1, 0)->q1q2
(q1q2, 0)->q1q2
(q1q2, 1)->q1q2
(q2, 0)->q2
(q2, 1)->q1q2
"""
