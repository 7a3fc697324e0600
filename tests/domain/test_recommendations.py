"""Tests for recommendations, benchmarks, industry keywords and improvement plans."""

import pytest

from resume_builder.domain import (
    ATSScore,
    PersonalInfo,
    ResumeContent,
    WorkExperience,
    analyze_format,
    analyze_resume,
    generate_detailed_improvements,
    generate_recommendations,
    get_industry_benchmark,
    get_industry_keywords,
)


class TestRecommendations:
    def test_thresholds_map_to_advice(self):
        score = ATSScore(20, 25, 20, 5, 8, 78)
        assert generate_recommendations(score) == [
            "Provide more detailed job descriptions with quantifiable achievements",
            "Use action verbs and specific metrics in your experience section",
            "Add more relevant technical and soft skills",
            "Include both hard and soft skills relevant to your target role",
        ]

    def test_perfect_score_has_no_recommendations(self):
        assert generate_recommendations(ATSScore(20, 25, 20, 20, 15, 100)) == []

    def test_zero_score_triggers_every_category(self):
        recommendations = generate_recommendations(ATSScore(0, 0, 0, 0, 0, 0))
        assert len(recommendations) == 9
        assert recommendations[0] == "Ensure all contact information is complete and properly formatted"


class TestBenchmark:
    @pytest.mark.parametrize(
        "total, category, percentile",
        [
            (100, "Excellent", 95),
            (95, "Excellent", 95),
            (90, "Excellent", 95),
            (89, "Very Good", 80),
            (80, "Very Good", 80),
            (70, "Good", 65),
            (60, "Fair", 40),
            (59, "Needs Improvement", 20),
            (55, "Needs Improvement", 20),
            (0, "Needs Improvement", 20),
        ],
    )
    def test_bands(self, total, category, percentile):
        benchmark = get_industry_benchmark(total)
        assert benchmark.category == category
        assert benchmark.percentile == percentile
        assert f"{percentile}th percentile" in benchmark.message


class TestIndustryKeywords:
    def test_technology_frontend_union_is_deduplicated(self):
        keywords = get_industry_keywords("technology", "frontend")
        assert len(keywords) == 27
        assert keywords.count("React") == 1
        assert keywords[0] == "JavaScript"
        assert keywords[-1] == "SASS"

    def test_lookup_is_case_insensitive(self):
        assert get_industry_keywords("Finance") == get_industry_keywords("finance")

    def test_role_only(self):
        assert get_industry_keywords(role="manager") == [
            "Leadership",
            "Team Management",
            "Project Management",
            "Strategy",
            "Planning",
        ]

    @pytest.mark.parametrize("industry, role", [(None, None), ("astronomy", None), ("astronomy", "pilot")])
    def test_unknown_falls_back_to_general(self, industry, role):
        keywords = get_industry_keywords(industry, role)
        assert len(keywords) == 10
        assert keywords[0] == "Communication"


class TestFormatAnalysis:
    def test_complete_resume_has_no_issues(self, resume_payload):
        analysis = analyze_format(ResumeContent.from_dict(resume_payload))
        assert analysis.score == 100
        assert analysis.issues == []
        assert len(analysis.strengths) == 4
        assert len(analysis.recommendations) == 4

    def test_empty_resume_loses_twenty_per_issue(self):
        analysis = analyze_format(ResumeContent())
        assert analysis.score == 20
        assert analysis.issues == [
            "Missing or incomplete personal information",
            "Professional summary is missing or too short",
            "No work experience provided",
            "Insufficient skills listed (aim for 8-12)",
        ]


class TestDetailedImprovements:
    def test_complete_resume_plan(self, resume_payload):
        plan = generate_detailed_improvements(ResumeContent.from_dict(resume_payload))
        assert plan.immediate == [
            "Add LinkedIn profile URL",
            "Add GitHub profile URL",
            "Add more relevant skills (aim for 8-12)",
        ]
        assert plan.short_term == []
        assert len(plan.long_term) == 3
        assert plan.keyword_suggestions == [
            "React",
            "Node.js",
            "TypeScript",
            "Express",
            "Django",
            "Flask",
            "Pandas",
            "NumPy",
            "Machine Learning",
        ]
        assert len(plan.format_suggestions) == 5

    def test_short_texts_land_in_short_term(self):
        resume = ResumeContent(
            personal_info=PersonalInfo(linkedin="linkedin.com/in/x"),
            professional_summary="Too short",
            work_experience=[WorkExperience(company="A", position="B", description="Did things")],
        )
        plan = generate_detailed_improvements(resume)
        assert plan.short_term == [
            "Write a compelling professional summary (100-150 words)",
            "Enhance job descriptions with specific achievements and metrics",
        ]
        assert "Add LinkedIn profile URL" not in plan.immediate

    def test_uses_given_keywords_instead_of_reextracting(self):
        plan = generate_detailed_improvements(ResumeContent(), keywords=["python"])
        assert plan.keyword_suggestions == ["Django", "Flask", "Pandas", "NumPy", "Machine Learning"]

    def test_to_dict_keys(self):
        data = generate_detailed_improvements(ResumeContent()).to_dict()
        assert set(data) == {"immediate", "shortTerm", "longTerm", "keywordSuggestions", "formatSuggestions"}


def test_analyze_resume_bundles_all_reports(resume_payload):
    analysis = analyze_resume(ResumeContent.from_dict(resume_payload))
    assert analysis.ats_score.total_score == 78
    assert analysis.industry_benchmark.category == "Good"
    assert analysis.format_analysis.score == 100
    assert len(analysis.recommendations) == 4

    data = analysis.to_dict()
    assert set(data) == {"atsScore", "recommendations", "keywordAnalysis", "formatAnalysis", "industryBenchmark"}
