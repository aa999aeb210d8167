PROMPT_SHADOW = (
    "Up-close dark silhouette of [CHARACHTER]. Torso angled slightly right, head "
    "turned back left (towards 8 o'clock). Wide sinister smile with glowing "
    "diamond grill teeth. Two thick iced-out diamond chains (no medallions). "
    "Style: VHS static filter background, moody shadow lighting, only diamonds "
    "sparkling bright. Maintain the exact same person's facial features, hair "
    "style, skin tone, and overall appearance - only add the luxury accessories "
    "and change the lighting."
)
