from models.requests import MentorCandidate
from services.mentor_matcher import availability_count, compute_matches
from services.tokenizer import tokenize_profile


def _mentor(**fields):
    base = {"name": "Alice", "title": "Engineer", "company": "Acme"}
    return MentorCandidate(**{**base, **fields})


class TestSkillMatches:
    def test_desired_skill_in_expertise(self):
        tokens = tokenize_profile("Python", "React, Node.js", "Agriculture")
        result = compute_matches(_mentor(expertise=["React", "GraphQL"]), tokens)
        assert result.skill_matches == ["React"]
        assert result.growth_matches == []

    def test_substring_matching_is_unanchored(self):
        tokens = tokenize_profile("Rust", "JS", "Agriculture")
        result = compute_matches(_mentor(expertise=["Node.js", "Java", "NestJS"]), tokens)
        assert result.skill_matches == ["Node.js", "NestJS"]

    def test_word_token_matches_longer_expertise(self):
        tokens = tokenize_profile("Rust", "cloud architecture", "Agriculture")
        result = compute_matches(_mentor(expertise=["Google Cloud", "System Design"]), tokens)
        assert result.skill_matches == ["Google Cloud"]

    def test_original_casing_is_preserved(self):
        tokens = tokenize_profile("Rust", "postgresql", "Agriculture")
        result = compute_matches(_mentor(expertise=["PostgreSQL"]), tokens)
        assert result.skill_matches == ["PostgreSQL"]

    def test_duplicates_removed_in_first_seen_order(self):
        tokens = tokenize_profile("Rust", "React", "Agriculture")
        result = compute_matches(_mentor(expertise=["React", "React Native", "React"]), tokens)
        assert result.skill_matches == ["React", "React Native"]

    def test_no_expertise_means_no_skill_matches(self):
        tokens = tokenize_profile("Python", "React", "Agriculture")
        result = compute_matches(_mentor(), tokens)
        assert result.skill_matches == []
        assert result.growth_matches == []


class TestGrowthMatches:
    def test_current_skill_in_expertise(self):
        tokens = tokenize_profile("react", "kubernetes", "Agriculture")
        result = compute_matches(_mentor(expertise=["React"]), tokens)
        assert result.skill_matches == []
        assert result.growth_matches == ["React"]

    def test_same_item_can_be_skill_and_growth(self):
        tokens = tokenize_profile("Python", "Python", "Agriculture")
        result = compute_matches(_mentor(expertise=["Python"]), tokens)
        assert result.skill_matches == ["Python"]
        assert result.growth_matches == ["Python"]


class TestIndustryMatches:
    def test_phrase_in_company(self):
        tokens = tokenize_profile("Python", "React", "FinTech & Healthcare")
        result = compute_matches(_mentor(company="FinTech Solutions Inc"), tokens)
        assert result.industry_matches == ["FinTech"]

    def test_phrase_in_title(self):
        tokens = tokenize_profile("Python", "React", "Security")
        result = compute_matches(_mentor(title="Security Architect"), tokens)
        assert result.industry_matches == ["Security"]

    def test_phrase_in_bio(self):
        tokens = tokenize_profile("Python", "React", "Healthcare")
        result = compute_matches(_mentor(bio="I build Healthcare products"), tokens)
        assert result.industry_matches == ["Healthcare"]

    def test_phrase_spanning_expertise_items(self):
        tokens = tokenize_profile("Python", "Go", "design systems")
        result = compute_matches(_mentor(expertise=["UX Design", "Design", "Systems"]), tokens)
        assert result.industry_matches == ["design systems"]

    def test_only_whole_phrases_count_not_words(self):
        tokens = tokenize_profile("Python", "React", "Retail lending")
        result = compute_matches(_mentor(company="Global Retail"), tokens)
        assert result.industry_matches == []

    def test_deduplicated_by_original_text(self):
        tokens = tokenize_profile("Python", "React", "FinTech, FinTech, fintech")
        result = compute_matches(_mentor(company="FinTech Co"), tokens)
        assert result.industry_matches == ["FinTech", "fintech"]

    def test_missing_bio_is_treated_as_empty(self):
        tokens = tokenize_profile("Python", "React", "Healthcare")
        result = compute_matches(_mentor(bio=None), tokens)
        assert result.industry_matches == []


class TestAvailabilityCount:
    def test_sums_all_slot_lists(self):
        assert availability_count({"2024-01-01": ["10am", "2pm"], "2024-01-02": ["9am"]}) == 3

    def test_non_list_values_count_as_zero(self):
        assert availability_count({"mon": ["10am"], "tue": "busy", "wed": None, "thu": 3}) == 1

    def test_empty_and_missing(self):
        assert availability_count({}) == 0
        assert availability_count(None) == 0
        assert availability_count({"mon": []}) == 0
