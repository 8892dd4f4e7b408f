"""
Sleep hygiene tips, grouped by average sleep quality tier.
"""

SLEEP_TIPS = {
    "poor": [
        "Establish a consistent sleep schedule, even on weekends",
        "Create a cool, dark, and quiet sleep environment",
        "Avoid screens at least 1 hour before bedtime",
        "Limit caffeine and alcohol consumption",
        "Try relaxation techniques like deep breathing or meditation before bed",
    ],
    "moderate": [
        "Consider light stretching or yoga before bed to release tension",
        "Keep a sleep journal to identify patterns affecting your rest",
        "Ensure your mattress and pillows provide proper support",
        "Avoid heavy meals within 2 hours of bedtime",
        "Try taking a warm bath or shower before bed",
    ],
    "good": [
        "You're on the right track! Maintain your healthy sleep habits",
        "For even better sleep, consider adding relaxing activities to your bedtime routine",
        "Keep monitoring your sleep patterns to maintain this quality",
        "Morning sunlight exposure can help reinforce your healthy sleep cycle",
        "Physical activity during the day contributes to better sleep quality",
    ],
}
