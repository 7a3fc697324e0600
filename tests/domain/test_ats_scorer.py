"""Tests for ATS scoring."""

import pytest

from resume_builder.domain import (
    SUB_SCORE_MAXIMUMS,
    ATSScore,
    PersonalInfo,
    ResumeContent,
    WorkExperience,
    calculate_ats_score,
    extract_keywords,
    format_ats_report,
    get_industry_benchmark,
    score_resume,
)


@pytest.fixture
def good_resume(resume_payload):
    return ResumeContent.from_dict(resume_payload)


@pytest.fixture
def empty_resume():
    return ResumeContent()


class TestScenarios:
    def test_complete_resume_sub_scores(self, good_resume):
        score = calculate_ats_score(good_resume)

        assert score.contact_info_score == 20
        assert score.keywords_score == 25
        assert score.format_score == 20
        assert score.experience_score == 5
        # 5 skills * 1.5 = 7.5, rounded half up
        assert score.skills_score == 8
        assert score.total_score == 78

    def test_complete_resume_suggestions(self, good_resume):
        score = calculate_ats_score(good_resume)
        assert list(score.suggestions) == [
            "Add LinkedIn profile for better visibility",
            "Add GitHub profile to showcase your technical projects",
            "Add more relevant skills (aim for 8-12 skills)",
        ]

    def test_empty_resume_scores_zero(self, empty_resume):
        score = calculate_ats_score(empty_resume)

        assert score.sub_scores() == {
            "contact_info": 0,
            "keywords": 0,
            "format": 0,
            "experience": 0,
            "skills": 0,
        }
        assert score.total_score == 0
        assert list(score.suggestions) == [
            "Add LinkedIn profile for better visibility",
            "Add more relevant keywords to improve ATS visibility",
            "Add a professional summary of at least 100 characters",
            "Add work experience to strengthen your resume",
            "Add education information",
            "Add at least 5 relevant skills",
            "Add more relevant skills (aim for 8-12 skills)",
        ]


class TestSubScores:
    @pytest.mark.parametrize(
        "fields, expected",
        [
            ({}, 0),
            ({"full_name": "A"}, 5),
            ({"full_name": "A", "email": "a@b.co"}, 10),
            ({"full_name": "A", "email": "a@b.co", "phone": "1"}, 15),
            ({"full_name": "A", "email": "a@b.co", "phone": "1", "location": "X"}, 20),
        ],
    )
    def test_contact_score_is_five_per_field(self, fields, expected):
        resume = ResumeContent(personal_info=PersonalInfo(**fields))
        assert calculate_ats_score(resume).contact_info_score == expected

    @pytest.mark.parametrize("count, expected", [(0, 0), (3, 6), (12, 24), (13, 25), (40, 25)])
    def test_keyword_score_is_two_per_keyword_capped(self, count, expected):
        keywords = [f"kw{i}" for i in range(count)]
        assert calculate_ats_score(ResumeContent(), keywords=keywords).keywords_score == expected

    @pytest.mark.parametrize(
        "count, expected",
        [(0, 0), (1, 2), (2, 3), (3, 5), (5, 8), (7, 11), (9, 14), (10, 15), (20, 15)],
    )
    def test_skills_score_rounds_half_up_and_caps(self, count, expected):
        resume = ResumeContent(skills=[f"skill{i}" for i in range(count)])
        assert calculate_ats_score(resume).skills_score == expected

    def test_experience_entry_points(self):
        long_desc = "d" * 100
        resume = ResumeContent(
            work_experience=[
                WorkExperience(company="A", position="B", description=long_desc),  # 5
                WorkExperience(company="A", position="B", description="short"),  # 2
                WorkExperience(description=long_desc),  # 3
                WorkExperience(company="A"),  # 0
            ]
        )
        score = calculate_ats_score(resume)
        assert score.experience_score == 10
        assert "Provide detailed job descriptions with quantifiable achievements" in score.suggestions

    def test_experience_score_caps_at_twenty(self):
        entry = WorkExperience(company="A", position="B", description="d" * 150)
        resume = ResumeContent(work_experience=[entry] * 6)
        assert calculate_ats_score(resume).experience_score == 20

    def test_summary_boundary_is_inclusive(self):
        assert calculate_ats_score(ResumeContent(professional_summary="s" * 100)).format_score == 5
        assert calculate_ats_score(ResumeContent(professional_summary="s" * 99)).format_score == 0

    def test_github_hint_requires_matching_skill(self):
        without = calculate_ats_score(ResumeContent(skills=["Excel"]))
        with_hint = calculate_ats_score(ResumeContent(skills=["Java"]))
        tip = "Add GitHub profile to showcase your technical projects"
        assert tip not in without.suggestions
        assert tip in with_hint.suggestions

    def test_profiles_suppress_contact_tips(self, resume_payload):
        resume_payload["personalInfo"]["linkedin"] = "linkedin.com/in/jane"
        resume_payload["personalInfo"]["github"] = "github.com/jane"
        score = calculate_ats_score(ResumeContent.from_dict(resume_payload))
        assert not any("LinkedIn" in s or "GitHub" in s for s in score.suggestions)


class TestInvariants:
    def test_total_is_sum_of_sub_scores(self, good_resume, empty_resume):
        for resume in (good_resume, empty_resume):
            score = calculate_ats_score(resume)
            assert score.total_score == sum(score.sub_scores().values())
            assert 0 <= score.total_score <= 100

    def test_sub_scores_within_maximums(self):
        entry = WorkExperience(company="A", position="B", description="word " * 200)
        resume = ResumeContent(
            personal_info=PersonalInfo(full_name="A", email="a@b.co", phone="1", location="X"),
            professional_summary="summary " * 50,
            work_experience=[entry] * 10,
            skills=[f"skill{i}" for i in range(30)],
        )
        score = calculate_ats_score(resume)
        for key, value in score.sub_scores().items():
            assert 0 <= value <= SUB_SCORE_MAXIMUMS[key]

    def test_scoring_is_deterministic(self, good_resume):
        first = calculate_ats_score(good_resume)
        second = calculate_ats_score(good_resume)
        assert first.sub_scores() == second.sub_scores()
        assert first.suggestions == second.suggestions

    def test_adding_skill_never_lowers_skills_score(self):
        skills = []
        previous = 0
        for i in range(15):
            skills.append(f"skill{i}")
            current = calculate_ats_score(ResumeContent(skills=list(skills))).skills_score
            assert current >= previous
            previous = current

    def test_score_resume_uses_extracted_keywords(self, good_resume):
        result = score_resume(good_resume)
        assert list(result.keywords) == extract_keywords(good_resume)
        assert result.ats_score.keywords_score == min(len(result.keywords) * 2, 25)


class TestATSScoreModel:
    def test_to_dict_uses_camel_case(self, good_resume):
        data = calculate_ats_score(good_resume).to_dict()
        assert data["totalScore"] == 78
        assert data["skillsScore"] == 8
        assert data["lastUpdated"].endswith("Z")

    def test_from_dict_recomputes_total(self):
        score = ATSScore.from_dict(
            {
                "contactInfoScore": 10,
                "keywordsScore": 4,
                "formatScore": 5,
                "experienceScore": 0,
                "skillsScore": 3,
                "totalScore": 99,
            }
        )
        assert score.total_score == 22


class TestFormatReport:
    def test_report_lists_categories_and_suggestions(self, good_resume):
        report = format_ats_report(calculate_ats_score(good_resume))
        assert "## ATS Score: 78/100 Good" in report
        assert "| Skills       |   8   |  15 |" in report
        assert "### Suggestions" in report
        assert "1. Add LinkedIn profile for better visibility" in report

    def test_report_without_suggestions(self):
        score = ATSScore(20, 25, 20, 20, 15, 100)
        report = format_ats_report(score)
        assert "Excellent" in report
        assert "Suggestions" not in report

    @pytest.mark.parametrize(
        "sub_scores, heading",
        [
            ((20, 20, 15, 10, 7), "## ATS Score: 72/100 Good"),
            ((20, 25, 20, 10, 10), "## ATS Score: 85/100 Very Good"),
            ((10, 10, 10, 10, 5), "## ATS Score: 45/100 Needs Improvement"),
        ],
    )
    def test_report_grade_matches_benchmark_category(self, sub_scores, heading):
        total = sum(sub_scores)
        report = format_ats_report(ATSScore(*sub_scores, total))
        assert report.splitlines()[0] == heading
        assert heading.endswith(get_industry_benchmark(total).category)
