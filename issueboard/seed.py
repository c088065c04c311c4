# Example issues loaded when the server starts, one or more per column.

SEED_ISSUES = [
    {
        "id": "1",
        "title": "Wash the dishes",
        "description": "Last night's dishes are still in the sink and Mom says they have to be done today. Dry them and put them back in the cupboard.",
        "status": "todo",
    },
    {
        "id": "2",
        "title": "Tidy up the bedroom",
        "description": "The room looks like a bomb went off. Fold the clothes, put the books back on the shelf and wipe the desk.",
        "status": "todo",
    },
    {
        "id": "3",
        "title": "Finish math homework",
        "description": "20 problems due tomorrow. Done with 12, 8 to go!",
        "status": "doing",
    },
    {
        "id": "4",
        "title": "Beat the Elden Ring final boss",
        "description": "Lost 15 times already. New plan: upgrade the gear first and practice the dodge timing.",
        "status": "doing",
    },
    {
        "id": "5",
        "title": "Walk the dog",
        "description": "30 minutes in the park so Momo can burn off some energy. Bring water, treats and poop bags.",
        "status": "done",
    },
    {
        "id": "6",
        "title": "Fold the laundry",
        "description": "All the clean clothes are folded and in the wardrobe. Mom said it was neatly done!",
        "status": "done",
    },
    {
        "id": "7",
        "title": "Watch the new episode of my favorite anime",
        "description": "Finally watched it. The main character unlocked a new power, can't wait for the next one!",
        "status": "done",
    },
    {
        "id": "8",
        "title": "Build a monster gaming PC",
        "description": "The dream build costs over 50,000... saving up for now, the old laptop will have to do.",
        "status": "closed",
    },
]
