from .models import DensityStatus

# Points available per category
DEFAULT_WEIGHTS = {
    "keyword_density_score": {"max_points": 40, "points_per_optimal": 5, "penalty_per_critical": 10},
    "readability_score": {"max_points": 30},
    "passive_voice_score": {"max_points": 10, "threshold_percent": 20},
    "adverb_usage_score": {"max_points": 10, "threshold_count": 5},
    "sentence_length_score": {"max_points": 10, "min_words": 15, "max_words": 25},
}


def _readability_points(flesch_score: int) -> int:
    if 60 <= flesch_score <= 80:
        return 30
    if flesch_score >= 50:
        return 20
    if flesch_score >= 40:
        return 10
    return 0


def add_score(score_data, check_name, earned, max_points, issue_msg=None, success_msg=None):
    score_data["earned_points"] += earned
    title_cased_check_name = check_name.replace("_score", "").replace("_", " ").title()
    if earned < max_points * 0.8 and issue_msg:
        score_data["issues"].append(f"{title_cased_check_name}: {issue_msg} (Score: {earned}/{max_points})")
    elif earned >= max_points * 0.8 and success_msg:
        score_data["successes"].append(f"{title_cased_check_name}: {success_msg} (Score: {earned}/{max_points})")


def explain_seo_score(keyword_density, flesch_score, writing_style, weights=None) -> dict:
    """
    Scores density, readability and writing style and explains each part.

    Returns:
        dict: ``score`` (0-100), ``issues`` and ``successes`` message lists.
    """
    weights = weights or DEFAULT_WEIGHTS
    score_data = {"earned_points": 0, "issues": [], "successes": []}

    # Keyword density
    kd = weights["keyword_density_score"]
    optimal = sum(1 for entry in keyword_density if entry.status is DensityStatus.OPTIMAL)
    critical = sum(1 for entry in keyword_density if entry.status is DensityStatus.CRITICAL)
    density_points = min(kd["max_points"], optimal * kd["points_per_optimal"]) - critical * kd["penalty_per_critical"]
    if critical:
        issue = f"{critical} keyword(s) exceed 5% density."
    elif not keyword_density:
        issue = "No repeated keywords found."
    else:
        issue = f"Only {optimal} keyword(s) at optimal density."
    add_score(score_data, "keyword_density_score", density_points, kd["max_points"],
              issue_msg=issue, success_msg=f"{optimal} keywords at optimal density.")

    # Readability
    rd_max = weights["readability_score"]["max_points"]
    add_score(score_data, "readability_score", _readability_points(flesch_score), rd_max,
              issue_msg=f"Readability could be improved (Flesch: {flesch_score}).",
              success_msg=f"Good readability (Flesch: {flesch_score}).")

    # Writing style
    pv = weights["passive_voice_score"]
    passive_ok = writing_style.passive_voice_percentage < pv["threshold_percent"]
    add_score(score_data, "passive_voice_score", pv["max_points"] if passive_ok else 0, pv["max_points"],
              issue_msg=f"Passive voice in {writing_style.passive_voice_percentage}% of sentences.",
              success_msg="Passive voice kept low.")

    av = weights["adverb_usage_score"]
    adverbs_ok = writing_style.adverb_count < av["threshold_count"]
    add_score(score_data, "adverb_usage_score", av["max_points"] if adverbs_ok else 0, av["max_points"],
              issue_msg=f"{writing_style.adverb_count} adverbs found.",
              success_msg="Adverbs used sparingly.")

    sl = weights["sentence_length_score"]
    length_ok = sl["min_words"] <= writing_style.avg_sentence_length <= sl["max_words"]
    add_score(score_data, "sentence_length_score", sl["max_points"] if length_ok else 0, sl["max_points"],
              issue_msg=f"Average sentence length is {writing_style.avg_sentence_length} words.",
              success_msg="Sentence length in the 15-25 word range.")

    score = max(0, min(100, int(score_data["earned_points"])))
    return {"score": score, "issues": score_data["issues"], "successes": score_data["successes"]}


def calculate_seo_score(keyword_density, flesch_score, writing_style) -> int:
    return explain_seo_score(keyword_density, flesch_score, writing_style)["score"]
