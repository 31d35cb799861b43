# survey_analytics/messages/analysis_messages.py

# ✅ Positive
SENTIMENT_ANALYSIS_SUCCESS = "Sentiment analysis completed successfully."
THEMATIC_ANALYSIS_SUCCESS = "Thematic sentiment analysis completed successfully."
STATISTICS_SUCCESS = "Statistical summary computed successfully."
CORRELATION_SUCCESS = "Correlation computed successfully."
CLUSTERING_SUCCESS = "Clustering completed successfully."
SURVEY_ANALYSIS_SUCCESS = "Survey analysis completed successfully."
HYPOTHESIS_TEST_SUCCESS = "Hypothesis test completed successfully."
ANOVA_SUCCESS = "ANOVA completed successfully."


# ❌ Errors
TOO_MANY_TEXTS = "Too many texts in a single request."
NON_FINITE_VALUES = "All numeric values must be finite numbers."
RAGGED_MATRIX = "Every data row must have the same number of features."
EMPTY_ROWS = "Data rows must contain at least one feature."
TOO_MANY_CLUSTERS = "Requested number of clusters exceeds the allowed maximum."
LENGTH_MISMATCH = "Both samples must have the same length."
CATEGORY_LENGTH_MISMATCH = "Categories must have the same length as values."
ANALYSIS_FAILED = "Analysis failed due to internal server error."
