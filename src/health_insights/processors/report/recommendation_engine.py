# ============================================================================
# src/health_insights/processors/report/recommendation_engine.py
# ============================================================================
"""
Recommendation Engine

Deterministic rule cascade over metrics and relations. Rules run in a fixed
order and append advice to the exercise, diet, medical and summary lists:

1. BMI summary line
2. Blood pressure tiers (crisis → stage 2 → elevated → healthy)
3. Blood sugar tiers (diabetic → pre-diabetic → healthy)
4. BMI tiers (obese → overweight → underweight → healthy), sets the walking goal
5. Heart rate (fast / slow)
6. Cholesterol (high / borderline)
7. Baseline advice when nothing critical fired and a list is still empty
8. Hydration
9. One follow-up per distinct condition

Within a tier cascade only the first matching tier fires. Lists are not
deduplicated. The walking goal is a single slot.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...core.models import (
    HealthMetrics,
    RecommendationSet,
    RelationBundle,
    WalkingGoal,
)

HEALTHY = "✓"
WARNING = "⚠"

# Follow-up line for threshold-derived conditions
CONDITION_FOLLOW_UPS = {
    "Diabetes": "Consult an endocrinologist for diabetes management",
    "Pre-diabetes": "Schedule a repeat fasting blood sugar test in 3 months",
    "Hypertension": "Consult a cardiologist for blood pressure management",
    "Obesity": "Book a follow-up to review weight-related health risks",
    "Overweight": "Discuss a weight management plan at your next check-up",
}


@dataclass
class _Draft:
    """Mutable working copy; frozen into a RecommendationSet at the end."""
    exercise: List[str] = field(default_factory=list)
    diet: List[str] = field(default_factory=list)
    medical: List[str] = field(default_factory=list)
    summary: List[str] = field(default_factory=list)
    walking_goal: Optional[WalkingGoal] = None

    def freeze(self) -> RecommendationSet:
        return RecommendationSet(
            exercise=tuple(self.exercise),
            diet=tuple(self.diet),
            medical=tuple(self.medical),
            summary=tuple(self.summary),
            walking_goal=self.walking_goal,
        )


class RecommendationEngine:
    """
    Turns metrics and relations into personalised advice.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def generate(self, metrics: HealthMetrics, relations: RelationBundle) -> RecommendationSet:
        """
        Run the full rule cascade.

        Args:
            metrics: Extracted metrics
            relations: Relation bundle for the same transcript

        Returns:
            RecommendationSet
        """
        draft = _Draft()

        self._bmi_summary(metrics, draft)
        self._blood_pressure_rules(metrics, draft)
        self._sugar_rules(metrics, draft)
        self._bmi_rules(metrics, draft)
        self._heart_rate_rules(metrics, draft)
        self._cholesterol_rules(metrics, draft)
        self._baseline_rules(metrics, draft)
        draft.diet.append("Stay hydrated - drink 8 glasses of water daily")
        self._condition_follow_ups(relations, draft)

        recommendations = draft.freeze()
        self.logger.info(
            f"Generated {len(recommendations.exercise)} exercise, {len(recommendations.diet)} diet, "
            f"{len(recommendations.medical)} medical recommendations"
        )
        return recommendations

    # ========================================================================
    # RULES (in evaluation order)
    # ========================================================================

    def _bmi_summary(self, metrics: HealthMetrics, draft: _Draft) -> None:
        bmi = metrics.bmi
        if bmi is None:
            return
        marker = HEALTHY if bmi.status == "Normal" else WARNING
        draft.summary.append(f"{marker} BMI: {bmi.value} ({bmi.status})")

    def _blood_pressure_rules(self, metrics: HealthMetrics, draft: _Draft) -> None:
        bp = metrics.blood_pressure
        if bp is None:
            return
        s, d = bp.systolic, bp.diastolic

        if s >= 180 or d >= 120:
            draft.exercise.append(
                f"{WARNING} URGENT: Stop all strenuous exercise until your blood pressure "
                f"({s}/{d} mmHg) is under medical control"
            )
            draft.medical.append(
                f"{WARNING} Hypertensive crisis ({s}/{d} mmHg) - seek emergency medical care immediately"
            )
        elif s >= 140 or d >= 90:
            draft.exercise.append(
                f"30 minutes of moderate cardio (brisk walking, cycling, swimming) 5 days a week "
                f"to bring down your blood pressure of {s}/{d} mmHg"
            )
            draft.diet.append(
                f"Limit sodium to less than 1500mg per day - your blood pressure is {s}/{d} mmHg"
            )
            draft.diet.append(
                f"Follow the DASH diet (fruits, vegetables, whole grains, low-fat dairy) "
                f"to lower your {s}/{d} mmHg reading"
            )
            draft.medical.append(
                f"Blood pressure of {s}/{d} mmHg is Stage 2 hypertension - "
                f"ask your doctor for a blood pressure medication review"
            )
        elif s >= 130 or d >= 80:
            draft.exercise.append(
                "30-45 minutes of aerobic activity on most days to keep blood pressure from rising"
            )
            draft.diet.append("Reduce sodium intake to less than 2000mg per day")
            draft.medical.append("Monitor your blood pressure weekly and keep a log for your doctor")
        else:
            draft.exercise.append("Maintain your current activity level to keep blood pressure healthy")
            draft.summary.append(f"{HEALTHY} Blood pressure is healthy ({s}/{d} mmHg)")

    def _sugar_rules(self, metrics: HealthMetrics, draft: _Draft) -> None:
        sugar = metrics.sugar_level
        if sugar is None:
            return
        value = sugar.value

        if value >= 126:
            draft.diet.append("Follow a strict carbohydrate-controlled diet (45-60g carbs per meal)")
            draft.diet.append("Eliminate sugary drinks, sweets and refined sugar")
            draft.diet.append("Eat small, frequent meals every 3-4 hours to keep blood sugar steady")
            draft.exercise.append("Take a 15-minute walk after every meal to help lower blood sugar")
            draft.medical.append(
                f"Blood sugar of {value} mg/dL is in the diabetic range - "
                f"start a diabetes management plan with your doctor"
            )
            draft.medical.append("Ask for an HbA1c test and a referral to an endocrinologist")
        elif value >= 100:
            draft.summary.append(
                f"{WARNING} Pre-diabetes alert: blood sugar of {value} mg/dL - "
                f"lifestyle changes now can prevent diabetes"
            )
            draft.diet.append("Switch refined grains for whole grains (oats, brown rice, whole wheat)")
            draft.exercise.append("Increase physical activity to at least 30 minutes a day")
            draft.medical.append("Recheck fasting blood sugar every 3-6 months")
        else:
            draft.summary.append(f"{HEALTHY} Blood sugar is normal ({value} mg/dL)")

    def _bmi_rules(self, metrics: HealthMetrics, draft: _Draft) -> None:
        bmi = metrics.bmi
        if bmi is None:
            return
        value = bmi.value

        if value >= 30:
            draft.exercise.append("Start with gradual low-impact walking, 20-30 minutes a day")
            draft.exercise.append("Try water aerobics or swimming to protect your joints")
            draft.diet.append("Aim for a calorie deficit of 500-750 calories per day")
            draft.walking_goal = WalkingGoal(
                steps=15000,
                description="Build up gradually to 15,000 steps a day to support weight loss",
            )
            draft.medical.append("Ask your doctor about a supervised weight management program")
        elif value >= 25:
            draft.exercise.append("45 minutes of moderate exercise 5 days a week")
            draft.diet.append("Practice portion control - use smaller plates and skip second servings")
            draft.walking_goal = WalkingGoal(
                steps=12000,
                description="Increase daily steps to help with weight management",
            )
        elif value < 18.5:
            draft.exercise.append("Strength training 2-3 times a week to build muscle mass")
            draft.diet.append(
                "Increase calorie intake with nutrient-dense foods (nuts, avocados, whole grains)"
            )
            draft.walking_goal = WalkingGoal(
                steps=8000,
                description="Moderate daily walking while you rebuild healthy weight",
            )
            draft.medical.append("Consult a nutritionist for a healthy weight gain plan")
        else:
            draft.walking_goal = WalkingGoal(
                steps=10000,
                description="Regular walking helps maintain cardiovascular health and weight management",
            )
            draft.summary.append(f"{HEALTHY} Weight is in the healthy range")

    def _heart_rate_rules(self, metrics: HealthMetrics, draft: _Draft) -> None:
        heart_rate = metrics.heart_rate
        if heart_rate is None:
            return
        value = heart_rate.value

        if value > 100:
            draft.medical.append(
                f"Resting heart rate of {value} bpm is high - get a cardiac evaluation"
            )
            draft.exercise.append("Start slowly and increase exercise intensity gradually")
        elif value < 60:
            draft.summary.append(
                f"Resting heart rate of {value} bpm is below 60 - common in active people, "
                f"mention it at your next check-up"
            )

    def _cholesterol_rules(self, metrics: HealthMetrics, draft: _Draft) -> None:
        cholesterol = metrics.cholesterol
        if cholesterol is None:
            return
        value = cholesterol.value

        if value > 240:
            draft.diet.append("Keep saturated fat below 7% of daily calories")
            draft.diet.append("Add omega-3 rich foods (salmon, walnuts, flaxseed)")
            draft.medical.append(
                f"Total cholesterol of {value} mg/dL is high - ask for a full lipid panel"
            )
        elif value > 200:
            draft.summary.append(
                f"{WARNING} Cholesterol of {value} mg/dL is borderline high - recheck in 6 months"
            )

    def _baseline_rules(self, metrics: HealthMetrics, draft: _Draft) -> None:
        if self._has_critical_finding(metrics):
            return

        if not draft.exercise:
            draft.exercise.append("150 minutes of moderate exercise per week")
            draft.exercise.append("Strength training 2 days a week")
        if not draft.diet:
            draft.diet.append("Eat a balanced diet of lean protein, whole grains and healthy fats")
            draft.diet.append("Eat 5-7 servings of fruits and vegetables daily")

    def _condition_follow_ups(self, relations: RelationBundle, draft: _Draft) -> None:
        seen = set()
        for condition in relations.conditions:
            if condition.name in seen:
                continue
            seen.add(condition.name)
            draft.medical.append(
                CONDITION_FOLLOW_UPS.get(
                    condition.name,
                    f"Follow up with your doctor about the reported {condition.name}",
                )
            )

    # ========================================================================
    # HELPERS
    # ========================================================================

    @staticmethod
    def _has_critical_finding(metrics: HealthMetrics) -> bool:
        bp = metrics.blood_pressure
        sugar = metrics.sugar_level
        bmi = metrics.bmi
        return (
            (bp is not None and bp.systolic >= 140)
            or (sugar is not None and sugar.value >= 126)
            or (bmi is not None and bmi.value >= 30)
        )
