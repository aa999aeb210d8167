PROMPT_GROUP = (
    "Group photo of [CHARACHTER] and friends, caught off guard, slightly "
    "squinting from the camera flash, all smiling wide with full diamond grills "
    "covering all teeth. Each person's grill is two solid connected pieces (one "
    "top, one bottom), each like a smooth band that covers all teeth at once. "
    "The surface is plated and fully encrusted with tiny faceted diamonds across "
    "the band, sparkling with bright glares. No natural teeth visible. "
    "Everyone's wrists are raised close to their mouths, flexing massive "
    "diamond-encrusted wristwatches and large sparkling diamond rings. They all "
    "look mischievous and faded, like they're having the most fun up to no good. "
    "The photo has subtle motion blur and a retro disposable camera flash "
    "effect, like a candid party snapshot mid-movement. The background is dark "
    "and moody with a bluish-purple tint, layered with a strong retro VHS party "
    "filter overlay, slight analog distortion, and a cinematic old-photograph "
    "aesthetic. The diamonds sparkle with an exaggerated, surreal luxury vibe, "
    "matching the same diamond treatment used on their chains and watches. "
    "Maintain the exact same facial features, hairstyle, skin tone, and overall "
    "appearance of each person, but add the luxury accessories and lighting "
    "effects to everyone in the group."
)
