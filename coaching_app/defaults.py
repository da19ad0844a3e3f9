DEFAULT_CATALOG = [
    {
        "id": "barbell-bench-press",
        "name": "Barbell Bench Press",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "middle",
        "movementPattern": "horizontal_push",
        "category": "strength",
        "alternatives": ["Dumbbell Bench Press", "Push-ups", "Machine Chest Press"],
        "equipmentRequired": ["Barbell", "Bench"],
        "difficulty": "intermediate",
    },
    {
        "id": "dumbbell-bench-press",
        "name": "Dumbbell Bench Press",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "middle",
        "movementPattern": "horizontal_push",
        "category": "strength",
        "alternatives": ["Barbell Bench Press", "Push-ups"],
        "equipmentRequired": ["Dumbbells", "Bench"],
        "difficulty": "beginner",
    },
    {
        "id": "incline-dumbbell-press",
        "name": "Incline Dumbbell Press",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "upper",
        "movementPattern": "incline_push",
        "category": "strength",
        "alternatives": ["Incline Barbell Press"],
        "equipmentRequired": ["Dumbbells", "Bench"],
        "difficulty": "intermediate",
    },
    {
        "id": "incline-barbell-press",
        "name": "Incline Barbell Press",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "upper",
        "movementPattern": "incline_push",
        "category": "strength",
        "alternatives": ["Incline Dumbbell Press"],
        "equipmentRequired": ["Barbell", "Bench"],
        "difficulty": "intermediate",
    },
    {
        "id": "push-ups",
        "name": "Push-ups",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "middle",
        "movementPattern": "horizontal_push",
        "category": "strength",
        "alternatives": ["Dumbbell Bench Press"],
        "equipmentRequired": [],
        "difficulty": "beginner",
    },
    {
        "id": "machine-chest-press",
        "name": "Machine Chest Press",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "middle",
        "movementPattern": "horizontal_push",
        "category": "strength",
        "alternatives": [],
        "equipmentRequired": ["Chest Press Machine"],
        "difficulty": "beginner",
    },
    {
        "id": "cable-fly",
        "name": "Cable Fly",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "middle",
        "movementPattern": "fly",
        "category": "strength",
        "alternatives": ["Dumbbell Fly"],
        "equipmentRequired": ["Cable Machine"],
        "difficulty": "beginner",
    },
    {
        "id": "dumbbell-fly",
        "name": "Dumbbell Fly",
        "primaryMuscleGroup": "Chest",
        "muscleRegion": "middle",
        "movementPattern": "fly",
        "category": "strength",
        "alternatives": ["Cable Fly"],
        "equipmentRequired": ["Dumbbells", "Bench"],
        "difficulty": "beginner",
    },
    {
        "id": "barbell-squat",
        "name": "Barbell Squat",
        "primaryMuscleGroup": "Legs",
        "muscleRegion": "quadriceps",
        "movementPattern": "squat",
        "category": "strength",
        "alternatives": ["Goblet Squat", "Leg Press", "Front Squat"],
        "equipmentRequired": ["Barbell", "Squat Rack"],
        "difficulty": "intermediate",
    },
    {
        "id": "front-squat",
        "name": "Front Squat",
        "primaryMuscleGroup": "Legs",
        "muscleRegion": "quadriceps",
        "movementPattern": "squat",
        "category": "strength",
        "alternatives": ["Barbell Squat", "Goblet Squat"],
        "equipmentRequired": ["Barbell", "Squat Rack"],
        "difficulty": "advanced",
    },
    {
        "id": "goblet-squat",
        "name": "Goblet Squat",
        "primaryMuscleGroup": "Legs",
        "muscleRegion": "quadriceps",
        "movementPattern": "squat",
        "category": "strength",
        "alternatives": ["Barbell Squat"],
        "equipmentRequired": ["Dumbbells"],
        "difficulty": "beginner",
    },
    {
        "id": "leg-press",
        "name": "Leg Press",
        "primaryMuscleGroup": "Legs",
        "muscleRegion": "quadriceps",
        "movementPattern": "squat",
        "category": "strength",
        "alternatives": ["Barbell Squat"],
        "equipmentRequired": ["Leg Press Machine"],
        "difficulty": "beginner",
    },
    {
        "id": "romanian-deadlift",
        "name": "Romanian Deadlift",
        "primaryMuscleGroup": "Legs",
        "muscleRegion": "hamstrings",
        "movementPattern": "hinge",
        "category": "strength",
        "alternatives": ["Barbell Deadlift"],
        "equipmentRequired": ["Barbell"],
        "difficulty": "intermediate",
    },
    {
        "id": "barbell-deadlift",
        "name": "Barbell Deadlift",
        "primaryMuscleGroup": "Back",
        "muscleRegion": "lower",
        "movementPattern": "hinge",
        "category": "strength",
        "alternatives": ["Romanian Deadlift", "Trap Bar Deadlift"],
        "equipmentRequired": ["Barbell"],
        "difficulty": "intermediate",
    },
    {
        "id": "trap-bar-deadlift",
        "name": "Trap Bar Deadlift",
        "primaryMuscleGroup": "Back",
        "muscleRegion": "lower",
        "movementPattern": "hinge",
        "category": "strength",
        "alternatives": ["Barbell Deadlift"],
        "equipmentRequired": ["Trap Bar"],
        "difficulty": "beginner",
    },
    {
        "id": "barbell-row",
        "name": "Barbell Row",
        "primaryMuscleGroup": "Back",
        "muscleRegion": "middle",
        "movementPattern": "horizontal_pull",
        "category": "strength",
        "alternatives": ["Dumbbell Row", "Seated Cable Row"],
        "equipmentRequired": ["Barbell"],
        "difficulty": "intermediate",
    },
    {
        "id": "dumbbell-row",
        "name": "Dumbbell Row",
        "primaryMuscleGroup": "Back",
        "muscleRegion": "middle",
        "movementPattern": "horizontal_pull",
        "category": "strength",
        "alternatives": ["Barbell Row"],
        "equipmentRequired": ["Dumbbells", "Bench"],
        "difficulty": "beginner",
    },
    {
        "id": "seated-cable-row",
        "name": "Seated Cable Row",
        "primaryMuscleGroup": "Back",
        "muscleRegion": "middle",
        "movementPattern": "horizontal_pull",
        "category": "strength",
        "alternatives": ["Barbell Row"],
        "equipmentRequired": ["Cable Machine"],
        "difficulty": "beginner",
    },
    {
        "id": "pull-ups",
        "name": "Pull-ups",
        "primaryMuscleGroup": "Back",
        "muscleRegion": "upper",
        "movementPattern": "vertical_pull",
        "category": "strength",
        "alternatives": ["Lat Pulldown"],
        "equipmentRequired": ["Pull-up Bar"],
        "difficulty": "intermediate",
    },
    {
        "id": "lat-pulldown",
        "name": "Lat Pulldown",
        "primaryMuscleGroup": "Back",
        "muscleRegion": "upper",
        "movementPattern": "vertical_pull",
        "category": "strength",
        "alternatives": ["Pull-ups"],
        "equipmentRequired": ["Cable Machine"],
        "difficulty": "beginner",
    },
    {
        "id": "overhead-press",
        "name": "Overhead Press",
        "primaryMuscleGroup": "Shoulders",
        "muscleRegion": "front",
        "movementPattern": "vertical_push",
        "category": "strength",
        "alternatives": ["Dumbbell Shoulder Press"],
        "equipmentRequired": ["Barbell"],
        "difficulty": "intermediate",
    },
    {
        "id": "dumbbell-shoulder-press",
        "name": "Dumbbell Shoulder Press",
        "primaryMuscleGroup": "Shoulders",
        "muscleRegion": "front",
        "movementPattern": "vertical_push",
        "category": "strength",
        "alternatives": ["Overhead Press"],
        "equipmentRequired": ["Dumbbells"],
        "difficulty": "beginner",
    },
    {
        "id": "lateral-raise",
        "name": "Lateral Raise",
        "primaryMuscleGroup": "Shoulders",
        "muscleRegion": "side",
        "movementPattern": "raise",
        "category": "strength",
        "alternatives": [],
        "equipmentRequired": ["Dumbbells"],
        "difficulty": "beginner",
    },
]

DEFAULT_PLANS = [
    {
        "id": "stronglifts-5x5",
        "name": "5x5 Stronglifts",
        "description": "Compound lifts with progressive overload.",
        "duration": 45,
        "daysPerWeek": 3,
        "level": "beginner",
        "exercises": [
            {"id": "squat", "name": "Barbell Squat", "sets": 5, "reps": 5, "weight": 135,
             "restTime": 180, "category": "strength"},
            {"id": "bench", "name": "Barbell Bench Press", "sets": 5, "reps": 5, "weight": 115,
             "restTime": 180, "category": "strength"},
            {"id": "row", "name": "Barbell Row", "sets": 5, "reps": 5, "weight": 95,
             "restTime": 180, "category": "strength"},
        ],
        "implementedSuggestions": [],
    },
    {
        "id": "upper-lower",
        "name": "Upper / Lower Split",
        "description": "Four training days alternating upper and lower body.",
        "duration": 60,
        "daysPerWeek": 4,
        "level": "intermediate",
        "weeklyPlan": {
            "weekDays": [
                {
                    "day": "Monday",
                    "workoutName": "Lower A",
                    "focus": "Squat strength",
                    "duration": 60,
                    "exercises": [
                        {"id": "lower-squat", "name": "Barbell Squat", "sets": "3-5", "reps": "6-8",
                         "weight": 155, "restTime": 150, "category": "strength"},
                        {"id": "lower-rdl", "name": "Romanian Deadlift", "sets": 3, "reps": 10,
                         "weight": 135, "restTime": 120, "category": "strength"},
                    ],
                },
                {
                    "day": "Tuesday",
                    "workoutName": "Upper A",
                    "focus": "Horizontal push and pull",
                    "duration": 60,
                    "exercises": [
                        {"id": "upper-bench", "name": "Barbell Bench Press", "sets": 4, "reps": 8,
                         "weight": 135, "restTime": 120, "category": "strength"},
                        {"id": "upper-row", "name": "Dumbbell Row", "sets": 3, "reps": 10,
                         "weight": 50, "restTime": 90, "category": "strength"},
                    ],
                },
                {
                    "day": "Thursday",
                    "workoutName": "Lower B",
                    "focus": "Hinge and volume",
                    "duration": 60,
                    "exercises": [
                        {"id": "lower-deadlift", "name": "Barbell Deadlift", "sets": 3, "reps": 5,
                         "weight": 185, "restTime": 180, "category": "strength"},
                        {"id": "lower-squat-b", "name": "Barbell Squat", "sets": 3, "reps": 10,
                         "weight": 135, "restTime": 120, "category": "strength"},
                    ],
                },
                {
                    "day": "Friday",
                    "workoutName": "Upper B",
                    "focus": "Vertical push and pull",
                    "duration": 60,
                    "exercises": [
                        {"id": "upper-ohp", "name": "Overhead Press", "sets": 4, "reps": 8,
                         "weight": 85, "restTime": 120, "category": "strength"},
                        {"id": "upper-pulldown", "name": "Lat Pulldown", "sets": 3, "reps": "10-12",
                         "weight": 100, "restTime": 90, "category": "strength"},
                    ],
                },
            ]
        },
        "implementedSuggestions": [],
    },
]

DEFAULT_SETTINGS = {
    "max_alternatives": 10,
    "default_rest_time": 60,
    "heart_rate_poll_seconds": 10,
    "weight_increment": 5,
    "rest_increment": 30,
}
