PROMPT_SLEAZE1 = (
    "[CHARACHTER] caught off guard slightly squinting because of the camera "
    "flash, smiling wide with a shiny diamond-encrusted grill. His wrist is "
    "raised close to his mouth to flex a massive diamond-covered wristwatch and "
    "a sparkling diamond ring. He looks mischievous and faded, like he's having "
    "the most fun up to no good. The photo has subtle motion blur and a retro "
    "disposable camera flash effect, like a candid party snapshot mid-movement. "
    "Dark, moody background with a bluish-purple tint, strong blue retro VHS "
    "party filter overlay with slight analog distortion, cinematic old "
    "photograph aesthetic. The diamonds sparkle brightly, exaggerated surreal "
    "luxury vibe. Maintain the exact same person's facial features, hair style, "
    "skin tone, and overall appearance - only add the luxury accessories and "
    "change the lighting. This should look like the same person with the sleaze "
    "transformation applied."
)
