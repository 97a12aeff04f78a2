"""
Scoring engine: pure, synchronous computations over in-memory values.

  career_match: weighted match score and ranking across careers
  skill_gap: gapped requirements, severity and summary statistics
  resume_keywords: keyword coverage and rule-based resume feedback

Nothing in here touches the database or the network.
"""
