PROMPT_SLEAZE2 = (
    "Shot of the person in the next image wearing a shiny, diamond-encrusted "
    "grill over their teeth, a large luxurious diamond-covered wristwatch, and a "
    "diamond ring. The person is raising their wrist near their mouth to "
    "highlight the jewelry, smiling wide to show the grill. The lighting has a "
    "dark, moody background with a blue-purple tint, creating a retro, grainy "
    "cinematic effect, just like an old photograph. Glare on the diamonds for "
    "definition. Maintain the exact same person's facial features, hair style, "
    "skin tone, and overall appearance - only add the luxury accessories and "
    "change the lighting."
)
