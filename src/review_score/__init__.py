"""
Review Score

Statistically adjusted "true" scores for rating data: Wilson lower bounds
for binomial votes and Bayesian lower bounds for ordinal star ratings.
"""

__version__ = "0.1.0"
