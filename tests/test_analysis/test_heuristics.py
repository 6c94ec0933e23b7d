"""test_heuristics.py
Run tests on the rule-based analysis heuristics.
"""
import pytest

from resume_match.analysis.helpers.heuristics import (
    build_summary,
    calculate_experience_score,
    calculate_match_score,
    calculate_skill_score,
    check_education,
    extract_education,
    extract_job_titles,
    extract_skills,
    extract_years_experience,
    extract_years_required,
    generate_assessment,
    generate_gaps,
    generate_strengths,
    round_half_up,
    split_matching_skills,
)
from resume_match.test_helpers.dummy_variables.dummy_documents import (
    SAMPLE_JOB_DESCRIPTION,
    SAMPLE_RESUME,
)


class TestSkills:
    def test_extract_skills_in_vocabulary_order(self):
        assert extract_skills(SAMPLE_JOB_DESCRIPTION) == ["react", "docker"]

    def test_substring_matching(self):
        """"java" is found inside "javascript"."""
        assert extract_skills("JavaScript") == ["java", "javascript"]

    def test_split_matching_skills(self):
        matching, missing = split_matching_skills(
            ["react", "docker"], extract_skills(SAMPLE_RESUME), SAMPLE_RESUME
        )
        assert matching == ["react"]
        assert missing == ["docker"]

    def test_skill_score(self):
        assert calculate_skill_score(["react"], ["react", "docker"]) == 50.0
        assert calculate_skill_score([], []) == 50.0
        assert calculate_skill_score(["a", "b"], ["a", "b"]) == 100.0


class TestExperience:
    def test_years_required(self):
        assert extract_years_required(SAMPLE_JOB_DESCRIPTION) == 3
        assert extract_years_required("Minimum 7 yrs in the field") == 7
        assert extract_years_required("No requirement stated") == 0

    def test_explicit_years_preferred(self):
        assert extract_years_experience(SAMPLE_RESUME, current_year=2025) == 5

    def test_date_range_fallback_uses_earliest_start(self):
        text = "Engineer (2019 - Present)\nIntern (2017 - 2018)"
        assert extract_years_experience(text, current_year=2025) == 8

    def test_phone_numbers_are_not_date_ranges(self):
        text = "Jane Doe\nPhone: 555 1234-5678\nDeveloper at Acme (2020 - Present)"
        assert extract_years_experience(text, current_year=2026) == 6

    def test_phone_number_only_is_zero(self):
        assert extract_years_experience("Phone: 555 1234-5678", current_year=2026) == 0

    def test_future_start_years_ignored(self):
        text = "Offer starts 2030 - 2031\nEngineer (2021 - current)"
        assert extract_years_experience(text, current_year=2026) == 5

    def test_no_signal_is_zero(self):
        assert extract_years_experience("Graduate looking for a first role", current_year=2025) == 0

    @pytest.mark.parametrize("candidate,required,expected", [
        (5, 3, 100),
        (0, 0, 100),
        (2, 0, 100),
        (0, 3, 30),
        (1, 3, 33),
        (2, 4, 50),
        (1, 8, 13),  # 12.5 rounds up
    ])
    def test_experience_score(self, candidate, required, expected):
        assert calculate_experience_score(candidate, required) == expected


class TestEducation:
    def test_no_requirement_passes(self):
        assert check_education("No degree listed", "Looking for a React developer") is True

    def test_requirement_met(self):
        assert check_education(SAMPLE_RESUME, SAMPLE_JOB_DESCRIPTION) is True

    def test_requirement_not_met(self):
        assert check_education("Self taught developer", SAMPLE_JOB_DESCRIPTION) is False

    def test_extract_education(self):
        assert extract_education(SAMPLE_RESUME) == [
            "Bachelor of Science in Computer Science, State University, 2019"
        ]

    def test_extract_bachelor_and_master(self):
        text = "B.S. Mathematics, Ohio State\nMaster of Science in Statistics, MIT"
        assert extract_education(text) == [
            "B.S. Mathematics, Ohio State",
            "Master of Science in Statistics, MIT",
        ]


class TestScoring:
    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(69.5) == 70
        assert round_half_up(69.4) == 69

    def test_weighted_blend(self):
        assert calculate_match_score(50, 100, 100) == 70
        assert calculate_match_score(100, 100, 100) == 100
        assert calculate_match_score(0, 30, 0) == 9

    @pytest.mark.parametrize("score,prefix", [
        (95, "Excellent match"),
        (80, "Excellent match"),
        (70, "Good match"),
        (45, "Moderate match"),
        (10, "Limited match"),
    ])
    def test_assessment_bands(self, score, prefix):
        assert generate_assessment(score, 3, 1).startswith(prefix)

    def test_assessment_counts(self):
        assessment = generate_assessment(70, 3, 1)
        assert "3 relevant strengths" in assessment
        assert "1 areas" in assessment


class TestNaturalLanguage:
    def test_strengths_for_sample(self):
        strengths = generate_strengths(["react"], 5, SAMPLE_RESUME)
        assert strengths == [
            "5+ years of professional experience",
            "Computer Science degree",
            "Senior-level experience",
        ]

    def test_strengths_many_skills_and_architecture(self):
        skills = ["react", "python", "docker", "aws", "sql", "git"]
        strengths = generate_strengths(skills, 3, "Designed systems as a university graduate")
        assert strengths[0] == "Strong technical skill set with react, python, docker, aws, sql"
        assert "3 years of relevant experience" in strengths
        assert "University degree" not in strengths
        assert "System design and architecture experience" in strengths

    def test_strengths_limit(self):
        assert len(generate_strengths(["a"] * 5, 10, SAMPLE_RESUME + " architect", limit=2)) == 2

    def test_gaps(self):
        gaps = generate_gaps(["docker", "aws", "go", "rust"], 5, 2, False)
        assert gaps == [
            "No docker experience mentioned",
            "No aws experience mentioned",
            "No go experience mentioned",
            "Experience (2 years) below requirement (5+ years)",
            "Education requirement not clearly met",
        ]

    def test_no_gaps(self):
        assert generate_gaps([], 3, 5, True) == []

    def test_job_titles(self):
        assert extract_job_titles(SAMPLE_RESUME) == ["Software engineer", "Senior Software Engineer"]

    def test_job_titles_limit(self):
        text = "Backend developer, Frontend developer, Web developer, Full-stack engineer"
        assert len(extract_job_titles(text)) == 3

    def test_summary(self):
        assert build_summary(5, ["react", "aws"]) == (
            "Professional with 5+ years of experience and skills in react, aws"
        )
        assert build_summary(0, []) == "Experienced professional"
