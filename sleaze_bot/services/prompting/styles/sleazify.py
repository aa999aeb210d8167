PROMPT_SLEAZIFY = (
    "[CHARACHTER] caught off guard, slightly squinting from the camera flash, "
    "smiling wide with a full diamond grill covering all teeth. The grill is two "
    "solid connected pieces (one top, one bottom), each like a smooth band that "
    "covers all teeth at once. The surface is plated and fully encrusted with "
    "tiny faceted diamonds across the band, sparkling with bright glares. No "
    "natural teeth visible. His wrist is raised close to his mouth, flexing a "
    "massive diamond-encrusted wristwatch and a large sparkling diamond ring. He "
    "looks mischievous and faded, like he's having the most fun up to no good. "
    "The photo has subtle motion blur and a retro disposable camera flash "
    "effect, like a candid party snapshot mid-movement. The background is dark "
    "and moody with a bluish-purple tint, layered with a strong retro VHS party "
    "filter overlay, slight analog distortion, and a cinematic old-photograph "
    "aesthetic. The diamonds sparkle with an exaggerated, surreal luxury vibe, "
    "matching the same diamond treatment used on his chains and watch. Maintain "
    "the exact same facial features, hairstyle, skin tone, and overall "
    "appearance of [CHARACHTER]. Only add the luxury accessories and lighting "
    "effects."
)
