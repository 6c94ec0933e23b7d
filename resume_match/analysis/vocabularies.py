"""vocabularies.py
Fixed keyword tables used by the rule-based analysis engine.
"""

# Known technology terms, matched as lowercase substrings
SKILL_VOCABULARY = (
    "react", "angular", "vue", "node.js", "nodejs", "express", "python", "java",
    "javascript", "typescript", "html", "css", "sql", "mongodb", "postgresql",
    "mysql", "aws", "azure", "gcp", "docker", "kubernetes", "k8s", "redis",
    "graphql", "rest", "api", "microservices", "git", "ci/cd", "jenkins",
    "terraform", "ansible", "linux", "agile", "scrum", "jira", "redux",
    "next.js", "nestjs", "spring", "django", "flask", "fastapi", ".net",
    "c++", "go", "rust", "php", "ruby", "rails", "laravel", "elasticsearch",
)

# A job description mentioning any of these asks for formal education
EDUCATION_REQUIREMENT_KEYWORDS = ("degree", "bachelor", "education", "university")

# A resume mentioning any of these satisfies an education requirement
DEGREE_KEYWORDS = ("bachelor", "master", "degree", "university", "college")

SENIORITY_KEYWORDS = ("lead", "senior")
ARCHITECTURE_KEYWORDS = ("architect", "design")
COMPUTER_SCIENCE_KEYWORDS = ("computer science", "cs ")

# Overall assessment templates keyed by the minimum score of their band
ASSESSMENT_TEMPLATES = (
    (80, (
        "Excellent match for this role. Candidate demonstrates {strengths} key strengths "
        "with minimal gaps. Strong recommendation to proceed with interview."
    )),
    (60, (
        "Good match for this role. Candidate shows {strengths} relevant strengths, though "
        "{gaps} areas could be improved. Recommend for interview."
    )),
    (40, (
        "Moderate match. While the candidate has {strengths} positive aspects, there are "
        "{gaps} notable gaps. May be worth considering if other factors align."
    )),
    (0, (
        "Limited match for this role. Significant gaps identified ({gaps} areas) that may "
        "impact suitability. Consider other candidates."
    )),
)
