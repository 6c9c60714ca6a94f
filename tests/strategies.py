"""Hypothesis strategies for property-based testing of railyard types."""

from hypothesis import strategies as st

from railyard import Err, Ok

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Exception strategies
exceptions = st.sampled_from(
    [
        ValueError("test"),
        TypeError("test"),
        RuntimeError("test"),
    ]
)

# Result strategies
oks = st.builds(Ok, integers)
errs = st.builds(Err, texts)
results = st.one_of(oks, errs)
result_lists = st.lists(results, max_size=20)
