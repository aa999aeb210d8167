PROMPT_SLEAZE3 = (
    "[CHARACHTER] caught off guard slightly squinting because of the camera "
    "flash, smiling wide with a set of luxurious diamonds covering his teeth. "
    "Faceted crystal cuts (not smooth surfaces). Bright sparkle glares on each "
    "tooth for definition. Keep the connected teeth grill effect. The mouth "
    "should only be displaying a grill, no teeth visible. His wrist is raised "
    "close to his mouth to flex a massive diamond-covered wristwatch and a "
    "sparkling diamond ring. He looks mischievous and faded, like he's having "
    "the most fun up to no good. The photo has subtle motion blur and a retro "
    "disposable camera flash effect, like a candid party snapshot mid-movement. "
    "Dark, moody background with a bluish-purple tint, strong blue retro VHS "
    "party filter overlay with slight analog distortion, cinematic old "
    "photograph aesthetic. The diamonds sparkle brightly, exaggerated surreal "
    "luxury vibe. Matching the same diamond treatment we've been using on chains "
    "and watches. Maintain the exact same person's facial features, hair style, "
    "skin tone, and overall appearance - only add the luxury accessories and "
    "change the lighting."
)
