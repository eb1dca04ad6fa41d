# Course recommender: hybrid profile retrieval feeding a conversational model.

__version__ = "0.3.0"
